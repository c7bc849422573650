from __future__ import annotations

from functools import wraps

from flask import Flask, flash, redirect, render_template, request, url_for

from ..common.datetime_utils import format_long_date, today_iso
from ..common.validators import require_iso_date
from ..container import Container
from ..core.constants import ALL_CLASSES
from ..core.exceptions import DomainError
from ..users.flask_session_repository import FlaskSessionRepository
from .model import AttendanceEntry


def register(app: Flask, container: Container) -> None:
    store = container.store
    web_session = FlaskSessionRepository()
    app.jinja_env.filters["long_date"] = format_long_date

    def login_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if not store.current_user(session=web_session):
                flash("Please log in to continue.", "warning")
                return redirect(url_for("login"))
            return view(*args, **kwargs)

        return wrapper

    @app.route("/attendance", methods=["GET", "POST"], endpoint="attendance")
    @login_required
    def attendance():
        class_name = request.values.get("class", "")
        date_s = request.values.get("date") or today_iso()

        if request.method == "POST":
            try:
                date_s = require_iso_date(request.form.get("date"), "Date")
                # One entry per student in the class at save time
                entries = [
                    AttendanceEntry(student_id=s.student_id, present=f"present_{s.student_id}" in request.form)
                    for s in (store.list_students_by_class(class_name) if class_name else [])
                ]
                store.record_attendance(date_s, class_name, entries)
                flash("Attendance saved successfully!", "success")
                return redirect(url_for("attendance", **{"class": class_name, "date": date_s}))
            except DomainError as e:
                flash(str(e), "danger")
            except Exception:
                app.logger.exception("Unexpected error while saving attendance")
                flash("An error occurred while saving attendance", "danger")

        classes = sorted(store.list_classes())
        students = store.list_students_by_class(class_name) if class_name else []
        return render_template(
            "attendance.html",
            classes=classes,
            students=students,
            selected_class=class_name,
            date=date_s,
            active_page="attendance",
        )

    @app.route("/report", methods=["GET"], endpoint="report")
    @login_required
    def report():
        date_s = request.args.get("date") or ""
        class_name = request.args.get("class") or ALL_CLASSES

        rows = []
        try:
            rows = store.report_rows(date_s or None, class_name)
        except DomainError as e:
            flash(str(e), "danger")

        return render_template(
            "report.html",
            rows=rows,
            classes=sorted(store.list_classes()),
            date=date_s,
            selected_class=class_name,
            active_page="report",
        )

    @app.route("/report/export", methods=["GET"], endpoint="report_export")
    @login_required
    def report_export():
        return "Export functionality is not implemented.", 501, {"Content-Type": "text/plain; charset=utf-8"}
