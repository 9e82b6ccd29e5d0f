"""Bulk employee import from CSV or Excel workforce spreadsheets.

Imports are all-or-nothing: every row is parsed and validated first and
nothing is written while any row has an error. Errors are reported with the
spreadsheet row number, counting the header as row 1.
"""

from __future__ import annotations

import csv
import re
from dataclasses import dataclass
from datetime import date, datetime
from io import BytesIO, StringIO
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Optional, Tuple

import structlog
from dateutil import parser as date_parser
from openpyxl import Workbook, load_workbook
from openpyxl.styles import Font, PatternFill
from openpyxl.utils import get_column_letter

from app.application.workspace import WorkspaceContext
from app.domain.entities.employment_equity import Employee
from app.domain.exceptions import CompanyNotFoundError, EmployeeImportError, InvalidFileError
from app.domain.plans import PlanFeature
from app.domain.services.eea.constants import (
    DisabilityType,
    Gender,
    OCCUPATIONAL_LEVEL_LABELS,
    OccupationalLevel,
    Race,
)
from app.domain.value_objects import EmployeeId

if TYPE_CHECKING:
    from app.application.dependencies.eea_dependencies import EEADependencies


FIRST_DATA_ROW = 2

TEMPLATE_COLUMNS = [
    "Employee Number",
    "First Name",
    "Last Name",
    "Initials",
    "Gender",
    "Race",
    "Nationality",
    "Foreign National",
    "ID Number",
    "Passport Number",
    "Disability",
    "Disability Type",
    "Employment Date",
    "Position",
    "Occupational Level",
    "Annual Fixed Income",
    "Annual Variable Income",
]

_COLUMN_ALIASES: Dict[str, Tuple[str, ...]] = {
    "employee_number": ("Employee Number", "Emp No"),
    "first_name": ("First Name",),
    "last_name": ("Last Name",),
    "initials": ("Initials",),
    "gender": ("Gender",),
    "race": ("Race",),
    "nationality": ("Nationality",),
    "foreign_national": ("Foreign National",),
    "id_number": ("ID Number",),
    "passport_number": ("Passport Number",),
    "disability": ("Disability",),
    "disability_type": ("Disability Type",),
    "employment_date": ("Employment Date",),
    "position": ("Position", "Job Title"),
    "occupational_level": ("Occupational Level",),
    "annual_fixed_income": ("Annual Fixed Income", "Annual Income"),
    "annual_variable_income": ("Annual Variable Income",),
}

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}")


@dataclass
class ImportResult:
    created: int
    updated: int

    @property
    def total(self) -> int:
        return self.created + self.updated


def read_rows(file_name: str, content: bytes) -> List[Dict[str, Any]]:
    """Read the first sheet (or the CSV) into dicts keyed by header."""
    extension = (file_name or "").lower().rsplit(".", 1)[-1]

    if extension == "csv":
        try:
            text = content.decode("utf-8-sig")
        except UnicodeDecodeError:
            raise InvalidFileError(filename=file_name, reason="CSV files must be UTF-8 encoded")
        reader = csv.DictReader(StringIO(text))
        return [
            {(key or "").strip(): value for key, value in row.items()}
            for row in reader
        ]

    if extension in ("xlsx", "xlsm"):
        try:
            workbook = load_workbook(BytesIO(content), read_only=True, data_only=True)
        except Exception as e:
            raise InvalidFileError(filename=file_name, reason=f"Could not read workbook: {e}")
        try:
            sheet = workbook.worksheets[0]
            rows = sheet.iter_rows(values_only=True)
            header = next(rows, None)
            if header is None:
                return []
            keys = [str(cell).strip() if cell is not None else "" for cell in header]
            records = []
            for values in rows:
                if values is None or all(value in (None, "") for value in values):
                    continue
                records.append(dict(zip(keys, values)))
            return records
        finally:
            workbook.close()

    raise InvalidFileError(filename=file_name, reason="Employee imports must be CSV or XLSX files")


def _cell(row: Dict[str, Any], key: str) -> Any:
    for header in _COLUMN_ALIASES[key]:
        value = row.get(header)
        if value not in (None, ""):
            return value.strip() if isinstance(value, str) else value
    return None


def _text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def _yes(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return _text(value).lower() in ("yes", "y", "true", "1")


def normalize_level(value: Any) -> str:
    """``Skilled Technical`` -> ``SKILLED_TECHNICAL``."""
    level = re.sub(r"\s+", "_", _text(value).upper())
    return re.sub(r"[^\w]", "", level)


def _parse_level(value: Any) -> Optional[OccupationalLevel]:
    key = normalize_level(value)
    if not key:
        return None
    try:
        return OccupationalLevel(key)
    except ValueError:
        pass
    for level, label in OCCUPATIONAL_LEVEL_LABELS.items():
        if normalize_level(label).replace("__", "_") == key.replace("__", "_"):
            return level
    raise ValueError(f"Invalid occupational level: {_text(value)}")


def _parse_disability_type(value: Any) -> Optional[DisabilityType]:
    text = _text(value).upper()
    if not text:
        return None
    key = re.sub(r"[^A-Z]+", "_", text).strip("_")
    for candidate in (key, key.split("_")[0]):
        try:
            return DisabilityType(candidate)
        except ValueError:
            continue
    return DisabilityType.OTHER


def _parse_date(value: Any) -> Optional[date]:
    if value in (None, ""):
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = _text(value)
    try:
        if _ISO_DATE.match(text):
            return date_parser.isoparse(text).date()
        # South African sheets write day before month
        return date_parser.parse(text, dayfirst=True).date()
    except (ValueError, OverflowError):
        raise ValueError(f"Invalid employment date: {text}")


def _parse_money(value: Any) -> Optional[float]:
    if value in (None, ""):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    cleaned = re.sub(r"[^\d.\-]", "", _text(value))
    return float(cleaned) if cleaned else None


def parse_employee_row(row: Dict[str, Any]) -> Tuple[Dict[str, Any], List[str]]:
    """Map one spreadsheet row to employee fields, collecting every problem."""
    errors: List[str] = []
    fields: Dict[str, Any] = {}

    fields["employee_number"] = _text(_cell(row, "employee_number"))
    if not fields["employee_number"]:
        errors.append("Missing employee number")

    fields["first_name"] = _text(_cell(row, "first_name"))
    if not fields["first_name"]:
        errors.append("Missing first name")

    fields["last_name"] = _text(_cell(row, "last_name"))
    if not fields["last_name"]:
        errors.append("Missing last name")

    try:
        fields["gender"] = Gender(_text(_cell(row, "gender")).upper())
    except ValueError:
        errors.append("Invalid gender (must be Male or Female)")

    try:
        fields["race"] = Race(_text(_cell(row, "race")).upper())
    except ValueError:
        errors.append("Invalid race (must be African, Coloured, Indian, or White)")

    try:
        level = _parse_level(_cell(row, "occupational_level"))
        if level is None:
            errors.append("Missing occupational level")
        fields["occupational_level"] = level
    except ValueError as e:
        errors.append(str(e))

    try:
        income = _parse_money(_cell(row, "annual_fixed_income"))
    except ValueError:
        income = None
    if income is None or income <= 0:
        errors.append("Invalid annual income")
    fields["annual_fixed_income"] = income

    try:
        fields["annual_variable_income"] = _parse_money(_cell(row, "annual_variable_income"))
    except ValueError:
        errors.append("Invalid annual variable income")

    try:
        fields["employment_date"] = _parse_date(_cell(row, "employment_date")) or date.today()
    except ValueError as e:
        errors.append(str(e))

    fields["initials"] = _text(_cell(row, "initials")) or None
    fields["nationality"] = _text(_cell(row, "nationality")) or "South African"
    fields["is_foreign_national"] = _yes(_cell(row, "foreign_national"))
    fields["id_number"] = _text(_cell(row, "id_number")) or None
    fields["passport_number"] = _text(_cell(row, "passport_number")) or None
    fields["has_disability"] = _yes(_cell(row, "disability"))
    fields["disability_type"] = _parse_disability_type(_cell(row, "disability_type")) if fields["has_disability"] else None
    fields["position"] = _text(_cell(row, "position")) or None

    return fields, errors


class EEAImportApplicationService:
    """Imports workforce spreadsheets into the company's employee records."""

    def __init__(self, dependencies: EEADependencies) -> None:
        self._deps = dependencies
        self._logger = structlog.get_logger(__name__)

    async def import_employees(self, workspace: WorkspaceContext, file_name: str, content: bytes) -> ImportResult:
        """
        Validate and import every row of an employee spreadsheet.

        Args:
            workspace: Workspace whose company receives the employees
            file_name: Uploaded file name; the extension selects the reader
            content: Raw file content

        Returns:
            ImportResult with created and updated counts

        Raises:
            EmployeeImportError: With every row error when any row is invalid
            InvalidFileError: If the file cannot be read
        """
        workspace.require_feature(PlanFeature.EEA_COMPLIANCE)
        company = await self._deps.company_repository.get_by_owner(workspace.owner_id)
        if company is None:
            raise CompanyNotFoundError("Company profile has not been set up")

        rows = read_rows(file_name, content)
        if not rows:
            raise EmployeeImportError(["File is empty or has no data rows"])

        self._logger.info("Importing employees", company_id=str(company.id), rows=len(rows))

        parsed, errors = self._validate_rows(rows)
        if errors:
            self._logger.warning("Employee import rejected", company_id=str(company.id), errors=len(errors))
            raise EmployeeImportError(errors)

        employees: List[Employee] = []
        created = updated = 0
        for row_number, fields in parsed:
            existing = await self._deps.employee_repository.get_by_employee_number(
                company.id, fields["employee_number"]
            )
            try:
                if existing is not None:
                    existing.update(**fields)
                    employees.append(existing)
                    updated += 1
                else:
                    employees.append(Employee(id=EmployeeId.generate(), company_id=company.id, **fields))
                    created += 1
            except ValueError as e:
                errors.append(f"Row {row_number}: {e}")

        if errors:
            raise EmployeeImportError(errors)

        await self._deps.employee_repository.save_many(employees)

        result = ImportResult(created=created, updated=updated)
        self._logger.info(
            "Employee import completed successfully",
            company_id=str(company.id),
            created=result.created,
            updated=result.updated,
        )
        return result

    @staticmethod
    def _validate_rows(rows: Iterable[Dict[str, Any]]) -> Tuple[List[Tuple[int, Dict[str, Any]]], List[str]]:
        parsed: List[Tuple[int, Dict[str, Any]]] = []
        errors: List[str] = []
        seen: Dict[str, int] = {}

        for index, row in enumerate(rows):
            row_number = index + FIRST_DATA_ROW
            fields, row_errors = parse_employee_row(row)
            errors.extend(f"Row {row_number}: {message}" for message in row_errors)

            number = fields.get("employee_number")
            if number:
                if number in seen:
                    errors.append(
                        f"Row {row_number}: Employee number {number} appears multiple times in the file"
                    )
                else:
                    seen[number] = row_number

            if not row_errors:
                parsed.append((row_number, fields))

        return parsed, errors

    def build_template(self) -> bytes:
        """Blank import workbook with the expected headers and an instructions sheet."""
        workbook = Workbook()
        sheet = workbook.active
        sheet.title = "Employees"

        header_font = Font(bold=True, color="FFFFFF")
        header_fill = PatternFill(start_color="1F4E78", end_color="1F4E78", fill_type="solid")
        for column, title in enumerate(TEMPLATE_COLUMNS, start=1):
            cell = sheet.cell(row=1, column=column, value=title)
            cell.font = header_font
            cell.fill = header_fill
            sheet.column_dimensions[get_column_letter(column)].width = max(14, len(title) + 4)

        sheet.append([
            "EMP001", "Thandi", "Nkosi", "T", "FEMALE", "AFRICAN", "South African", "No",
            "", "", "No", "", date.today().isoformat(), "Financial Analyst",
            "PROFESSIONALLY_QUALIFIED_MID_MANAGEMENT", 450000, 50000,
        ])

        instructions = workbook.create_sheet("Instructions")
        lines = [
            "Employee Import Instructions",
            "Required: Employee Number, First Name, Last Name, Gender, Race, Occupational Level, Annual Fixed Income",
            "Gender: MALE or FEMALE",
            "Race: AFRICAN, COLOURED, INDIAN or WHITE",
            "Foreign National and Disability: Yes or No",
            "Occupational Level: " + ", ".join(level.value for level in OccupationalLevel),
            "Employment Date: YYYY-MM-DD",
            "Rows whose employee number already exists update that employee.",
        ]
        for row, line in enumerate(lines, start=1):
            instructions.cell(row=row, column=1, value=line)
        instructions["A1"].font = Font(bold=True, size=14)
        instructions.column_dimensions["A"].width = 110

        output = BytesIO()
        workbook.save(output)
        return output.getvalue()


__all__ = [
    "EEAImportApplicationService",
    "ImportResult",
    "TEMPLATE_COLUMNS",
    "normalize_level",
    "parse_employee_row",
    "read_rows",
]
