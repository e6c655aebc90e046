"""Report export to CSV."""
import csv
import io
import logging
from datetime import datetime
from typing import Optional

from core.entities import EmployeeReport, GeneralReport
from dashboard.messages import ReportMessages
from dashboard.utils.formatters import format_employee_name
from dashboard.utils.time_utils import format_date, format_datetime, to_local

logger = logging.getLogger(__name__)


def _to_bytes(output: io.StringIO) -> bytes:
    # utf-8-sig for Excel compatibility
    csv_bytes = output.getvalue().encode('utf-8-sig')
    output.close()
    return csv_bytes


def general_report_to_csv(report: GeneralReport) -> bytes:
    """
    Export general report as CSV.

    Layout: period and totals, then the employee table, then the service
    table, separated by empty rows.
    """
    output = io.StringIO()
    writer = csv.writer(output, quoting=csv.QUOTE_MINIMAL)

    writer.writerow([
        ReportMessages.PERIOD,
        ReportMessages.period(format_date(report.period.start), format_date(report.period.end)),
    ])
    writer.writerow([ReportMessages.TOTAL_EARNINGS, f"{report.total_earnings:.2f}"])
    writer.writerow([ReportMessages.APPOINTMENTS_COUNT, report.appointments_count])
    writer.writerow([])

    writer.writerow([ReportMessages.EMPLOYEES_SECTION])
    writer.writerow([ReportMessages.EMPLOYEE, ReportMessages.APPOINTMENTS, ReportMessages.EARNINGS])
    for stat in report.employee_stats:
        writer.writerow([stat.employee_name, stat.appointments_count, f"{stat.earnings:.2f}"])
    writer.writerow([])

    writer.writerow([ReportMessages.SERVICES_SECTION])
    writer.writerow([ReportMessages.SERVICE, ReportMessages.QUANTITY, ReportMessages.EARNINGS])
    for stat in report.service_stats:
        writer.writerow([stat.service_name, stat.count, f"{stat.earnings:.2f}"])

    logger.info(
        f"Exported general report: {len(report.employee_stats)} employees, "
        f"{len(report.service_stats)} services"
    )
    return _to_bytes(output)


def employee_report_to_csv(report: EmployeeReport) -> bytes:
    """Export employee report as CSV: one row per completed job."""
    output = io.StringIO()
    writer = csv.writer(output, quoting=csv.QUOTE_MINIMAL)

    writer.writerow([ReportMessages.EMPLOYEE, format_employee_name(report.employee)])
    writer.writerow([ReportMessages.TOTAL_EARNINGS, f"{report.total_earnings:.2f}"])
    writer.writerow([ReportMessages.APPOINTMENTS_COUNT, report.appointments_count])
    writer.writerow([])

    writer.writerow([ReportMessages.DATE, ReportMessages.SERVICES, ReportMessages.EARNINGS])
    for detail in sorted(report.appointment_details, key=lambda d: to_local(d.date)):
        writer.writerow([
            format_datetime(detail.date),
            ", ".join(
                item.name if item.quantity == 1 else f"{item.name} x{item.quantity}"
                for item in detail.services
            ),
            f"{detail.earnings:.2f}",
        ])

    logger.info(
        f"Exported employee report: {report.appointments_count} appointments",
        extra={"employee_id": report.employee_id}
    )
    return _to_bytes(output)


def export_filename(prefix: str, now: Optional[datetime] = None) -> str:
    """Generate filename with timestamp, e.g. report_20240115_093000.csv."""
    timestamp = (now or datetime.now()).strftime('%Y%m%d_%H%M%S')
    return f"{prefix}_{timestamp}.csv"
