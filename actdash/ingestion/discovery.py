"""Repository discovery for an organization or user."""

from typing import List, Sequence

from ..errors import DiscoveryError, FetchError
from .gh_client import GhClient
from .models import RepositoryPayload


def split_repo_names(values: Sequence[str]) -> List[str]:
    """Flatten repeated and comma separated repository names."""
    names = []
    for value in values:
        names.extend(part.strip() for part in value.split(",") if part.strip())
    return names


async def discover_repositories(
    client: GhClient,
    selector: str,
    repo_names: Sequence[str] = (),
) -> List[RepositoryPayload]:
    """
    Resolve the repositories to report on.

    Explicit names are fetched as `<selector>/<name>`. Otherwise the selector
    is tried as an organization, then as a user.

    Raises:
        FetchError: An explicitly named repository could not be fetched
        DiscoveryError: The selector is neither an organization nor a user
    """
    if repo_names:
        result = []
        for name in repo_names:
            try:
                result.append(await client.get_repo(selector, name))
            except FetchError as e:
                raise FetchError(f"failed to fetch data for {selector}/{name}: {e}") from e
        return result

    try:
        return await client.list_repos(f"orgs/{selector}/repos")
    except FetchError as org_error:
        try:
            return await client.list_repos(f"users/{selector}/repos")
        except FetchError as user_error:
            raise DiscoveryError(
                f"could not find a user or org called '{selector}': {org_error}; {user_error}"
            ) from user_error
