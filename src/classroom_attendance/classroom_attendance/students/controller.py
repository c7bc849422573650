from __future__ import annotations

from functools import wraps

from flask import Flask, flash, redirect, render_template, request, url_for

from ..common.validators import require_non_empty
from ..container import Container
from ..core.exceptions import DomainError
from ..users.flask_session_repository import FlaskSessionRepository


def register(app: Flask, container: Container) -> None:
    store = container.store
    web_session = FlaskSessionRepository()

    def login_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if not store.current_user(session=web_session):
                flash("Please log in to continue.", "warning")
                return redirect(url_for("login"))
            return view(*args, **kwargs)

        return wrapper

    @app.route("/students", methods=["GET", "POST"], endpoint="students")
    @login_required
    def students():
        if request.method == "POST":
            try:
                name = require_non_empty(request.form.get("name"), "Name")
                roll_number = require_non_empty(request.form.get("rollNumber"), "Roll number")
                class_name = require_non_empty(request.form.get("class"), "Class")

                store.add_student(name, roll_number, class_name)
                flash("Student added.", "success")
                return redirect(url_for("students"))
            except DomainError as e:
                flash(str(e), "danger")
            except Exception:
                app.logger.exception("Unexpected error while adding student")
                flash("An error occurred while adding student", "danger")

        return render_template("students.html", students=store.list_students(), active_page="students")
