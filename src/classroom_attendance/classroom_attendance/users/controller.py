from __future__ import annotations

import traceback

from flask import Flask, flash, redirect, render_template, request, url_for

from ..container import Container
from ..core.exceptions import AuthenticationError, ValidationError
from .flask_session_repository import FlaskSessionRepository


def register(app: Flask, container: Container) -> None:
    store = container.store
    web_session = FlaskSessionRepository()

    @app.context_processor
    def inject_current_user():
        return {"current_user": store.current_user(session=web_session)}

    def _system_error(action: str, e: Exception) -> None:
        traceback.print_exc()
        app.logger.error("Unexpected error during %s: %s", action, e)
        if bool(app.config.get("DEBUG", False)):
            flash(f"System error during {action}: {e}", "danger")
        else:
            flash(f"System error during {action}", "danger")

    @app.route("/", methods=["GET", "POST"], endpoint="login")
    def login():
        if store.current_user(session=web_session):
            return redirect(url_for("dashboard"))

        if request.method == "POST":
            email = request.form.get("email", "")
            password = request.form.get("password", "")

            try:
                store.login(email, password, session=web_session)
                flash("Logged in successfully!", "success")
                return redirect(url_for("dashboard"))
            except AuthenticationError as e:
                flash(str(e), "danger")
            except Exception as e:
                _system_error("login", e)

        return render_template("login.html")

    @app.route("/register", methods=["GET", "POST"], endpoint="register")
    def register_view():
        if request.method == "POST":
            try:
                store.register(
                    name=request.form.get("name", ""),
                    email=request.form.get("email", ""),
                    password=request.form.get("password", ""),
                )
                flash("Registration successful! Please log in.", "success")
                return redirect(url_for("login"))
            except ValidationError as e:
                flash(str(e), "danger")
            except Exception as e:
                _system_error("registration", e)

        return render_template("register.html")

    @app.route("/logout", endpoint="logout")
    def logout():
        store.logout(session=web_session)
        flash("You have been logged out.", "info")
        return redirect(url_for("login"))

    @app.route("/dashboard", endpoint="dashboard")
    def dashboard():
        if not store.current_user(session=web_session):
            return redirect(url_for("login"))
        return redirect(url_for("students"))
