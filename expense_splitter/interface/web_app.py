"""Mini README: FastAPI-powered control panel for Expense Splitter.

Structure:
    * create_application - application factory wiring routes and templates.

Each application instance owns one ledger and one notifier gateway. Routes
translate ledger errors into HTTP responses: validation problems become 400,
a guarded participant removal becomes 409. Every response that follows a
mutation carries freshly computed balances.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.templating import Jinja2Templates

from ..configuration import get_settings
from ..ledger import ExpenseLedger, ReferentialIntegrityError, ValidationError
from ..logging_utils import get_logger
from ..notifications import REGISTRY, NotifierGateway, dispatch_balance_notifications

LOGGER = get_logger(__name__)


def create_application(
    ledger: Optional[ExpenseLedger] = None,
    gateway: Optional[NotifierGateway] = None,
) -> FastAPI:
    """Create the FastAPI application with routes and dependencies."""

    settings = get_settings()
    app = FastAPI(title="Expense Splitter", version="0.1.0")
    templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))

    ledger = ledger if ledger is not None else ExpenseLedger()
    gateway = gateway if gateway is not None else REGISTRY.create(settings.notifier_gateway)

    @app.get("/", response_class=HTMLResponse)
    async def dashboard(request: Request) -> HTMLResponse:
        """Render participants, expenses and balances."""

        snapshot = ledger.export_snapshot()
        LOGGER.debug(
            "Rendering dashboard with %s participants and %s expenses",
            len(snapshot["participants"]),
            len(snapshot["expenses"]),
        )
        return templates.TemplateResponse(
            request,
            "dashboard.html",
            {"snapshot": snapshot, "gateway": gateway.provider_name},
        )

    @app.get("/state")
    async def state() -> JSONResponse:
        """Return the full ledger snapshot."""

        return JSONResponse(ledger.export_snapshot())

    @app.get("/balances")
    async def balances() -> JSONResponse:
        """Return each participant's current balance."""

        return JSONResponse({"balances": ledger.compute_balances()})

    @app.post("/participants", status_code=201)
    async def add_participant(name: str = Form("")) -> JSONResponse:
        """Add a participant to the group."""

        try:
            ledger.add_participant(name)
        except ValidationError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        return JSONResponse(
            {"participants": ledger.list_participants(), "balances": ledger.compute_balances()},
            status_code=201,
        )

    @app.delete("/participants/{name:path}")
    async def remove_participant(name: str) -> JSONResponse:
        """Remove a participant who has not paid for any expense."""

        try:
            ledger.remove_participant(name)
        except ReferentialIntegrityError as error:
            raise HTTPException(status_code=409, detail=str(error)) from error
        except ValidationError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        return JSONResponse(
            {"participants": ledger.list_participants(), "balances": ledger.compute_balances()}
        )

    @app.post("/expenses", status_code=201)
    async def add_expense(
        description: str = Form(""),
        amount: str = Form(""),
        payer: str = Form(""),
    ) -> JSONResponse:
        """Record an expense paid by a current participant."""

        try:
            expense = ledger.add_expense(description, amount, payer)
        except ValidationError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        return JSONResponse(
            {
                "expense": {
                    **expense.as_dict(),
                    "summary": expense.describe(ledger.currency_symbol),
                },
                "balances": ledger.compute_balances(),
            },
            status_code=201,
        )

    @app.delete("/expenses")
    async def clear_expenses() -> JSONResponse:
        """Remove every expense while keeping the group."""

        removed = ledger.clear_expenses()
        return JSONResponse(
            {
                "removed": removed,
                "message": "All expenses have been cleared.",
                "balances": ledger.compute_balances(),
            }
        )

    @app.post("/notify")
    async def notify() -> JSONResponse:
        """Send each participant their balance through the configured gateway."""

        report = dispatch_balance_notifications(
            ledger, gateway, title=settings.notification_title
        )
        return JSONResponse(report.as_dict())

    return app
