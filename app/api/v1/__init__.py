"""
API v1 Routes

CV library, job specs, matching, teams, custom fields, activity logs and
the Employment Equity compliance module.
"""

from .accounts import router as accounts_router
from .activity_logs import router as activity_logs_router
from .custom_fields import router as custom_fields_router
from .cvs import router as cvs_router
from .eea import router as eea_router
from .job_specs import router as job_specs_router
from .matching import router as matching_router
from .teams import router as teams_router

__all__ = [
    "accounts_router",
    "activity_logs_router",
    "custom_fields_router",
    "cvs_router",
    "eea_router",
    "job_specs_router",
    "matching_router",
    "teams_router",
]
