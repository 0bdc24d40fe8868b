import logging
from urllib.parse import quote

from bitbucket_cli.config import AppConfig
from bitbucket_cli.models import BrowseTarget, RepositoryIdentity

logger = logging.getLogger(__name__)

# sub-delims plus ":" and "@" may appear unescaped in a path segment; "/" may not
SEGMENT_SAFE = "!$&'()*+,;=:@"


def _segment(value: str) -> str:
    return quote(value, safe=SEGMENT_SAFE)


def build_browse_url(
    identity: RepositoryIdentity,
    branch: str | None = None,
    commit: str | None = None,
    *,
    base_url: str | None = None,
) -> str:
    base_url = base_url or AppConfig().base_url
    segments = [identity.workspace, identity.name]
    if branch is not None:
        segments += ["branch", branch]
    if commit is not None:
        segments += ["src", commit]
    path = "/".join(_segment(segment) for segment in segments)
    return f"{base_url}/{path}"


def target_url(target: BrowseTarget, config: AppConfig | None = None) -> str:
    config = config or AppConfig()
    if target.branch is not None and target.commit is not None:
        # BitBucket has no page for this path; kept for compatibility
        logger.warning(
            "Both branch and commit given; the URL combines /branch/%s and /src/%s",
            target.branch,
            target.commit,
        )
    return build_browse_url(target.identity, target.branch, target.commit, base_url=config.base_url)
