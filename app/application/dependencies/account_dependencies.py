"""Dependency container for the account application service."""

from dataclasses import dataclass

from app.domain.repositories.account_repository import IUserAccountRepository
from app.domain.repositories.cv_repository import ICVRepository
from app.domain.repositories.job_spec_repository import IJobSpecRepository


@dataclass
class AccountDependencies:
    """Container for account service dependencies."""

    account_repository: IUserAccountRepository
    cv_repository: ICVRepository
    job_spec_repository: IJobSpecRepository


__all__ = ["AccountDependencies"]
