from pathlib import Path

import pytest

from bitbucket_cli.errors import ConfigNotFoundError, ConfigUnreadableError
from bitbucket_cli.git_config import parse, parse_local, read_local, select_bitbucket_remote
from bitbucket_cli.models import RemoteEntry

GIT_CONFIG = """\
[core]
\trepositoryformatversion = 0
\tfilemode = true
\tbare = false
[remote "origin"]
\turl = https://bitbucket.org/acme/widgets.git
\tfetch = +refs/heads/*:refs/remotes/origin/*
[branch "main"]
\tremote = origin
\tmerge = refs/heads/main
"""


def remote(name: str, url: str) -> RemoteEntry:
    return RemoteEntry(name=name, url=url, fetch=f"+refs/heads/*:refs/remotes/{name}/*")


def test_parse_reads_remote_sections_only() -> None:
    collection = parse(GIT_CONFIG)

    assert collection.remotes == [
        RemoteEntry(
            name="origin",
            url="https://bitbucket.org/acme/widgets.git",
            fetch="+refs/heads/*:refs/remotes/origin/*",
        )
    ]
    assert collection.malformed == []


def test_parse_keeps_declaration_order() -> None:
    text = (
        '[remote "upstream"]\n\turl = https://github.com/acme/widgets.git\n'
        "\tfetch = +refs/heads/*:refs/remotes/upstream/*\n"
        '[remote "origin"]\n\turl = git@bitbucket.org:acme/widgets.git\n'
        "\tfetch = +refs/heads/*:refs/remotes/origin/*\n"
    )

    assert [entry.name for entry in parse(text).remotes] == ["upstream", "origin"]


def test_parse_does_not_depend_on_key_order() -> None:
    text = '[remote "origin"]\n\tfetch = +refs/heads/*:refs/remotes/origin/*\n\turl = https://bitbucket.org/acme/widgets\n'

    (entry,) = parse(text).remotes
    assert entry.url == "https://bitbucket.org/acme/widgets"


def test_parse_tolerates_truncated_remote() -> None:
    text = GIT_CONFIG + '[remote "broken"]\n\turl = https://bitbucket.org/other/repo.git\n'

    collection = parse(text)

    assert [entry.name for entry in collection.remotes] == ["origin"]
    (broken,) = collection.malformed
    assert broken.name == "broken"
    assert broken.missing == ["fetch"]
    assert 'Malformed remote "broken"' in str(broken.error)


def test_parse_ignores_comments_and_text_before_first_section() -> None:
    text = "garbage line\n# comment\n; another\n" + GIT_CONFIG

    assert len(parse(text).remotes) == 1


def test_parse_empty_text() -> None:
    collection = parse("")

    assert collection.remotes == []
    assert collection.malformed == []


def test_select_filters_by_host_regardless_of_order() -> None:
    github = remote("upstream", "https://github.com/acme/widgets.git")
    bitbucket = remote("origin", "https://bitbucket.org/acme/widgets.git")

    assert select_bitbucket_remote([github, bitbucket]) == bitbucket
    assert select_bitbucket_remote([bitbucket, github]) == bitbucket


def test_select_last_match_wins() -> None:
    first = remote("origin", "https://bitbucket.org/acme/widgets.git")
    second = remote("fork", "https://bitbucket.org/someone/widgets.git")

    assert select_bitbucket_remote([first, second]) == second


def test_select_matches_scp_like_remotes() -> None:
    ssh = remote("origin", "git@bitbucket.org:acme/widgets.git")

    assert select_bitbucket_remote([ssh]) == ssh


def test_select_skips_unparseable_urls() -> None:
    bad = remote("bad", "not a url")
    good = remote("origin", "https://bitbucket.org/acme/widgets.git")

    assert select_bitbucket_remote([good, bad]) == good


def test_select_returns_none_without_match() -> None:
    assert select_bitbucket_remote([remote("origin", "https://github.com/acme/widgets.git")]) is None
    assert select_bitbucket_remote([]) is None


def test_read_local_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigNotFoundError) as excinfo:
        parse_local(tmp_path)

    assert excinfo.value.path == tmp_path / ".git" / "config"


def test_read_local_unreadable(tmp_path: Path) -> None:
    (tmp_path / ".git" / "config").mkdir(parents=True)

    with pytest.raises(ConfigUnreadableError):
        read_local(tmp_path)


def test_parse_local_reads_file(tmp_path: Path) -> None:
    (tmp_path / ".git").mkdir()
    (tmp_path / ".git" / "config").write_text(GIT_CONFIG, encoding="utf-8")

    assert [entry.name for entry in parse_local(tmp_path).remotes] == ["origin"]
