"""
Case Intake Webhook

Receives call-center transcript payloads and turns each into a Salesforce case.

Responses:
  200 {"success": true, "message", "salesforceResponse"}  case created
  400 {"error"}                                            no extracted_data
  500 {"success": false, "error"}                          auth/case failure

Notification failures never change the response once the case exists.
"""

import json
import logging
from typing import Any

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from infra import bootstrap_infrastructure
from pipeline import CaseIntakeHandler, ExtractionError
from services.crm import CRMError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/webhook", tags=["Case Intake"])

SUCCESS_MESSAGE = "Salesforce Case created and notifications attempted"


async def get_case_handler() -> CaseIntakeHandler:
    """Handler built once per process from the environment, on the event loop."""
    return bootstrap_infrastructure().get_handler()


def _error_response(detail: Any) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"success": False, "error": detail},
    )


@router.post("")
@router.post("/", include_in_schema=False)
async def case_intake_webhook(
    request: Request,
    handler: CaseIntakeHandler = Depends(get_case_handler),
) -> JSONResponse:
    """
    Create a support case from a transcript payload.

    Expected payload:
    {
        "extracted_data": {"user_name": "Asha", "mobile": "+91-9876543210", ...},
        "telephony_data": {"recording_url": "https://..."},
        "transcript": "...",
        "conversation_duration": 125
    }
    """
    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Invalid JSON payload"},
        )

    logger.info(
        "Webhook received payload",
        extra={"keys": sorted(payload) if isinstance(payload, dict) else None},
    )

    try:
        result = await handler.handle(payload)
    except ExtractionError as e:
        logger.warning(f"Rejected payload: {e}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": str(e)},
        )
    except CRMError as e:
        logger.error(f"Webhook error: {e}", extra={"upstream": e.detail})
        return _error_response(e.detail)
    except Exception as e:
        logger.error(f"Webhook error: {e}", exc_info=True)
        return _error_response(str(e) or e.__class__.__name__)

    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content={
            "success": True,
            "message": SUCCESS_MESSAGE,
            "salesforceResponse": result.case.data,
        },
    )
