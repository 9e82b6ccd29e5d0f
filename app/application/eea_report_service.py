"""Internal EEA report exports: workforce profile (EEA2) and income differentials (EEA4)."""

from __future__ import annotations

import csv
import re
from dataclasses import dataclass
from datetime import date
from enum import Enum
from io import BytesIO, StringIO
from typing import TYPE_CHECKING, Any, List, Sequence

import structlog
from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill
from openpyxl.utils import get_column_letter

from app.application.workspace import WorkspaceContext
from app.domain.entities.employment_equity import Company, Employee
from app.domain.exceptions import ReportGenerationError, ValidationError
from app.domain.services.eea.compliance_engine import (
    INCOME_DIFFERENTIAL_TOLERANCE,
    ComplianceReport,
    IncomeDifferentialReport,
)
from app.domain.services.eea.constants import (
    EmployeeStatus,
    format_economic_sector,
    format_occupational_level,
    is_designated_group,
)

if TYPE_CHECKING:
    from app.application.eea_service import EEAApplicationService


class ReportType(str, Enum):
    EEA2 = "EEA2"
    EEA4 = "EEA4"


class ReportFormat(str, Enum):
    CSV = "csv"
    XLSX = "xlsx"


MEDIA_TYPES = {
    ReportFormat.CSV: "text/csv",
    ReportFormat.XLSX: "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
}

REPORT_TITLES = {
    ReportType.EEA2: "Workforce_Analysis_Report",
    ReportType.EEA4: "Income_Analysis_Report",
}

PROFILE_HEADER = [
    "Occupational Level", "AM", "AF", "CM", "CF", "IM", "IF", "WM", "WF", "FM", "FF",
    "Total", "Designated %", "Target %", "Gap %", "Status",
]
INCOME_HEADER = [
    "Occupational Level", "Designated Count", "Designated Avg",
    "Non-Designated Count", "Non-Designated Avg", "Differential %",
]


@dataclass
class GeneratedReport:
    file_name: str
    content: bytes
    media_type: str


def report_file_name(report_type: ReportType, company_name: str, extension: str, on: date = None) -> str:
    safe_name = re.sub(r"\s+", "_", company_name.strip())
    safe_name = re.sub(r"[^\w\-]", "", safe_name) or "Company"
    return f"{REPORT_TITLES[report_type]}_{safe_name}_{(on or date.today()).isoformat()}.{extension}"


def _label(value: Any) -> str:
    return str(getattr(value, "value", value) or "").replace("_", " ")


def _format_date(value: Any) -> str:
    return value.isoformat() if value else "N/A"


def _percent(value: float) -> str:
    return f"{value:.1f}%"


class EEAReportApplicationService:
    """Builds downloadable EEA report files from compliance data."""

    def __init__(self, eea_service: EEAApplicationService) -> None:
        self._eea = eea_service
        self._logger = structlog.get_logger(__name__)

    async def export_report(self, workspace: WorkspaceContext, report_type: str, file_format: str = "xlsx") -> GeneratedReport:
        """
        Generate an EEA report file.

        Args:
            workspace: Workspace whose company is reported on
            report_type: ``EEA2`` or ``EEA4``
            file_format: ``csv`` or ``xlsx``

        Returns:
            GeneratedReport with file name, content and media type

        Raises:
            ValidationError: If the report type or format is unknown
            ReportGenerationError: If there is no workforce data to report on
        """
        try:
            kind = ReportType(str(report_type).upper())
        except ValueError:
            raise ValidationError("Report type must be EEA2 or EEA4")
        try:
            fmt = ReportFormat(str(file_format).lower())
        except ValueError:
            raise ValidationError("Report format must be csv or xlsx")

        company = await self._eea.get_company(workspace)
        self._logger.info("Generating EEA report", report_type=kind.value, format=fmt.value, company_id=str(company.id))

        if kind == ReportType.EEA2:
            report = await self._eea.get_compliance_report(workspace)
            if report is None:
                raise ReportGenerationError("No employee data or sector targets available for the workforce report")
            employees = await self._eea.list_employees(workspace, status=EmployeeStatus.ACTIVE)
            content = (
                self._workforce_csv(report) if fmt == ReportFormat.CSV
                else self._workforce_workbook(company, report, employees)
            )
        else:
            employees = await self._eea.list_employees(workspace, status=EmployeeStatus.ACTIVE)
            if not employees:
                raise ReportGenerationError("No active employees available for the income report")
            differentials = await self._eea.get_income_differentials(workspace)
            content = (
                self._income_csv(differentials) if fmt == ReportFormat.CSV
                else self._income_workbook(company, differentials, employees)
            )

        generated = GeneratedReport(
            file_name=report_file_name(kind, company.name, fmt.value),
            content=content,
            media_type=MEDIA_TYPES[fmt],
        )
        self._logger.info("EEA report generated successfully", file_name=generated.file_name, size=len(content))
        return generated

    # ------------------------------------------------------------------
    # EEA2 workforce profile
    # ------------------------------------------------------------------

    @staticmethod
    def _profile_rows(report: ComplianceReport) -> List[List[Any]]:
        rows = []
        for level in report.levels:
            counts = level.demographics
            rows.append([
                level.level_name,
                counts.AM, counts.AF, counts.CM, counts.CF, counts.IM, counts.IF, counts.WM, counts.WF,
                counts.foreignMale, counts.foreignFemale,
                level.total_employees,
                _percent(level.current_percentage),
                _percent(level.target_percentage),
                f"{'+' if level.gap > 0 else ''}{level.gap:.1f}%",
                _label(level.status),
            ])
        return rows

    def _workforce_csv(self, report: ComplianceReport) -> bytes:
        return self._to_csv(PROFILE_HEADER, self._profile_rows(report))

    def _workforce_workbook(self, company: Company, report: ComplianceReport, employees: Sequence[Employee]) -> bytes:
        workbook = Workbook()
        summary = workbook.active
        summary.title = "Summary"
        disability = report.disability_compliance
        for row in [
            ["WORKFORCE ANALYSIS REPORT"],
            ["Internal Compliance Report"],
            [],
            ["Company Information"],
            ["Company Name", company.name],
            ["Economic Sector", format_economic_sector(company.sector)],
            ["EE Reference Number", company.ee_reference_number or "N/A"],
            ["Reporting Period From", _format_date(company.reporting_period_from)],
            ["Reporting Period To", _format_date(company.reporting_period_to)],
            ["Report Generated", date.today().isoformat()],
            [],
            ["Overall Summary"],
            ["Total Employees", report.total_employees],
            ["Designated Group Count", report.designated_count],
            ["Designated Group %", _percent(report.designated_percentage * 100)],
            ["Disability Count", disability.current_count],
            ["Disability %", _percent(disability.current_percentage)],
            ["Overall Status", _label(report.overall_status)],
            [],
            [
                "DISCLAIMER",
                "This is an internal compliance analysis report. Official Department of Labour "
                "submissions require Form EEA2.",
            ],
        ]:
            summary.append(row)
        self._style_title(summary)

        profile = workbook.create_sheet("Workforce Profile")
        self._write_table(profile, PROFILE_HEADER, self._profile_rows(report))

        details = workbook.create_sheet("Employee Details")
        self._write_table(
            details,
            ["Employee Number", "First Name", "Last Name", "Gender", "Race", "Disability",
             "Foreign National", "Occupational Level", "Annual Income"],
            [
                [
                    e.employee_number, e.first_name, e.last_name, _label(e.gender), _label(e.race),
                    "Yes" if e.has_disability else "No",
                    "Yes" if e.is_foreign_national else "No",
                    format_occupational_level(e.occupational_level),
                    e.annual_fixed_income,
                ]
                for e in employees if e.is_active
            ],
        )
        return self._save(workbook)

    # ------------------------------------------------------------------
    # EEA4 income differentials
    # ------------------------------------------------------------------

    @staticmethod
    def _income_rows(differentials: IncomeDifferentialReport) -> List[List[Any]]:
        rows = []
        for item in [differentials.overall, *differentials.levels]:
            rows.append([
                item.level_name,
                item.designated_count,
                f"{item.designated_average:.2f}",
                item.non_designated_count,
                f"{item.non_designated_average:.2f}",
                _percent(item.differential_percentage),
            ])
        return rows

    @staticmethod
    def compliance_statement(differentials: IncomeDifferentialReport) -> str:
        differential = differentials.overall.differential_percentage
        if differentials.within_tolerance:
            return (
                f"The overall income differential of {differential:.1f}% is within the "
                f"{INCOME_DIFFERENTIAL_TOLERANCE:.0f}% tolerance."
            )
        return (
            f"The overall income differential of {differential:.1f}% exceeds the "
            f"{INCOME_DIFFERENTIAL_TOLERANCE:.0f}% tolerance. Review remuneration for designated groups."
        )

    def _income_csv(self, differentials: IncomeDifferentialReport) -> bytes:
        return self._to_csv(INCOME_HEADER, self._income_rows(differentials))

    def _income_workbook(
        self,
        company: Company,
        differentials: IncomeDifferentialReport,
        employees: Sequence[Employee],
    ) -> bytes:
        overall = differentials.overall
        workbook = Workbook()
        summary = workbook.active
        summary.title = "Summary"
        for row in [
            ["INCOME ANALYSIS REPORT"],
            ["Internal Compliance Report"],
            [],
            ["Company Information"],
            ["Company Name", company.name],
            ["Economic Sector", format_economic_sector(company.sector)],
            ["EE Reference Number", company.ee_reference_number or "N/A"],
            ["Report Generated", date.today().isoformat()],
            [],
            ["Overall Income Analysis"],
            ["Designated Group Count", overall.designated_count],
            ["Designated Group Average Income", f"{overall.designated_average:.2f}"],
            ["Non-Designated Group Count", overall.non_designated_count],
            ["Non-Designated Group Average Income", f"{overall.non_designated_average:.2f}"],
            ["Income Differential %", _percent(overall.differential_percentage)],
            ["Compliance Statement", self.compliance_statement(differentials)],
            [],
            [
                "DISCLAIMER",
                "This is an internal income analysis report. Official Department of Labour "
                "submissions require Form EEA4.",
            ],
        ]:
            summary.append(row)
        self._style_title(summary)

        by_level = workbook.create_sheet("By Occupational Level")
        self._write_table(by_level, INCOME_HEADER, self._income_rows(differentials)[1:])

        details = workbook.create_sheet("Employee Details")
        self._write_table(
            details,
            ["Employee Number", "Name", "Gender", "Race", "Occupational Level", "Annual Income", "Designated Group"],
            [
                [
                    e.employee_number, e.full_name, _label(e.gender), _label(e.race),
                    format_occupational_level(e.occupational_level), e.annual_fixed_income,
                    "Yes" if is_designated_group(e) else "No",
                ]
                for e in employees if e.is_active and e.annual_fixed_income
            ],
        )
        return self._save(workbook)

    # ------------------------------------------------------------------
    # Output helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _to_csv(header: List[str], rows: List[List[Any]]) -> bytes:
        buffer = StringIO()
        writer = csv.writer(buffer)
        writer.writerow(header)
        writer.writerows(rows)
        return buffer.getvalue().encode("utf-8")

    @staticmethod
    def _write_table(sheet, header: List[str], rows: List[List[Any]]) -> None:
        sheet.append(header)
        header_font = Font(bold=True, color="FFFFFF")
        header_fill = PatternFill(start_color="1F4E78", end_color="1F4E78", fill_type="solid")
        for column, title in enumerate(header, start=1):
            cell = sheet.cell(row=1, column=column)
            cell.font = header_font
            cell.fill = header_fill
            sheet.column_dimensions[get_column_letter(column)].width = max(10, len(title) + 4)
        for row in rows:
            sheet.append(row)

    @staticmethod
    def _style_title(sheet) -> None:
        sheet["A1"].font = Font(bold=True, size=14)
        sheet.column_dimensions["A"].width = 36
        sheet.column_dimensions["B"].width = 60

    @staticmethod
    def _save(workbook: Workbook) -> bytes:
        output = BytesIO()
        workbook.save(output)
        return output.getvalue()


__all__ = [
    "EEAReportApplicationService",
    "GeneratedReport",
    "ReportFormat",
    "ReportType",
    "report_file_name",
]
