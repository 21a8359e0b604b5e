"""
Workflow Event Models

Pull request event payload delivered to the action by the workflow runner.
"""

from typing import Optional

from pydantic import BaseModel


SUPPORTED_ACTIONS = {'opened', 'synchronize'}


class RepositoryOwner(BaseModel):
    login: str


class Repository(BaseModel):
    name: str
    owner: RepositoryOwner


class PullRequestEvent(BaseModel):
    """Fields of a ``pull_request`` event payload used by the reviewer"""
    action: str
    number: int
    repository: Repository
    before: Optional[str] = None
    after: Optional[str] = None

    @property
    def owner(self) -> str:
        return self.repository.owner.login

    @property
    def repo(self) -> str:
        return self.repository.name

    @property
    def is_supported(self) -> bool:
        return self.action in SUPPORTED_ACTIONS
