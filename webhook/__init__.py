"""
Webhook module - FastAPI route handlers.

Includes:
- case_intake.py: Call-center transcript → Salesforce case
"""

from webhook.case_intake import router as case_intake_router

__all__ = ["case_intake_router"]
