"""Employment Equity Act compliance domain services."""

from app.domain.services.eea.compliance_engine import ComplianceEngine

__all__ = ["ComplianceEngine"]
