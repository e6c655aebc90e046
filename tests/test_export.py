"""Tests for CSV report export."""
import csv
import io
from datetime import datetime

import pytz

from core.entities import (
    AppointmentDetail,
    AppointmentServiceItem,
    DateRange,
    Employee,
    EmployeeReport,
    EmployeeStat,
    GeneralReport,
    ServiceStat,
)
from services.export import employee_report_to_csv, export_filename, general_report_to_csv


MINSK = pytz.timezone("Europe/Minsk")


def read_rows(data: bytes) -> list:
    assert data.startswith(b"\xef\xbb\xbf")
    return list(csv.reader(io.StringIO(data.decode("utf-8-sig"))))


def test_general_report_csv():
    report = GeneralReport(
        period=DateRange(
            start=MINSK.localize(datetime(2024, 1, 1)),
            end=MINSK.localize(datetime(2024, 1, 31, 23, 59, 59)),
        ),
        total_earnings=80,
        appointments_count=2,
        employee_stats=[EmployeeStat("e1", "Иван Петров", 50, 2)],
        service_stats=[ServiceStat("s1", "Мойка, кузов", 3, 60)],
    )

    rows = read_rows(general_report_to_csv(report))

    assert rows[0] == ["Период", "01.01.2024 - 31.01.2024"]
    assert rows[1] == ["Общий заработок", "80.00"]
    assert ["Иван Петров", "2", "50.00"] in rows
    assert ["Мойка, кузов", "3", "60.00"] in rows


def test_employee_report_csv():
    employee = Employee(id="e1", first_name="Иван", last_name="Петров")
    report = EmployeeReport(
        employee_id="e1",
        employee=employee,
        total_earnings=30,
        appointments_count=2,
        appointment_details=[
            AppointmentDetail(
                id="a2",
                date=MINSK.localize(datetime(2024, 1, 12, 9, 0)),
                services=[AppointmentServiceItem("s1", "Мойка", 10, 2)],
                earnings=20,
            ),
            AppointmentDetail(
                id="a1",
                date=MINSK.localize(datetime(2024, 1, 10, 9, 0)),
                services=[
                    AppointmentServiceItem("s1", "Мойка", 10),
                    AppointmentServiceItem("s2", "Сушка", 5),
                ],
                earnings=10,
            ),
        ],
    )

    rows = read_rows(employee_report_to_csv(report))

    assert rows[0] == ["Сотрудник", "Иван Петров"]
    assert rows[-2] == ["10.01.2024 09:00", "Мойка, Сушка", "10.00"]
    assert rows[-1] == ["12.01.2024 09:00", "Мойка x2", "20.00"]


def test_export_filename():
    assert export_filename("report", datetime(2024, 1, 15, 9, 30)) == "report_20240115_093000.csv"
