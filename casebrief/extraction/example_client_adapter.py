"""Example model client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseModelClient and register the provider in AnalysisClientFactory.
"""

import asyncio
import json
from typing import ClassVar

from casebrief.extraction.client_base import BaseModelClient
from casebrief.upload.models import EncodedDocument


class ExampleClientAdapter(BaseModelClient):
    """Example adapter that returns a fixed, valid extraction JSON.

    No network calls. Useful for local development, demos, and tests; an
    optional delay simulates model latency.
    """

    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "applicantIncome": 120000,
        "respondentIncome": 85000,
        "childSupport": 1250,
        "spousalSupport": 800,
        "hasODSP": False,
        "hasCPP": False,
        "complianceNotes": [
            "Child support aligns with Federal Guidelines.",
            "Spousal support duration is within advisory range.",
        ],
        "caseInfo": {
            "parties": "Smith vs. Smith",
            "jurisdiction": "Superior Court of California, County of Orange",
            "caseNumber": "19D004821",
            "date": "Oct 12, 2024",
        },
        "custody": [
            {
                "id": 1,
                "label": "Regular Schedule",
                "value": "2-2-5-5 Rotation",
                "detail": "Mother: Mon/Tue, Father: Wed/Thu, Alternate Weekends.",
            },
            {
                "id": 2,
                "label": "Summer Break",
                "value": "Week On / Week Off",
                "detail": "Exchanges occur Fridays at 6:00 PM.",
            },
            {
                "id": 3,
                "label": "Thanksgiving",
                "value": "Alternating Years",
                "detail": "Father in even years, Mother in odd years.",
            },
        ],
        "financials": [
            {"id": 1, "type": "support", "title": "Child Support",
             "amount": "$1,250/mo", "due": "1st of month"},
            {"id": 2, "type": "support", "title": "Spousal Support",
             "amount": "$800/mo", "due": "Until Dec 2028"},
            {"id": 3, "type": "asset", "title": "Marital Home Refinance",
             "amount": "Deadline", "due": "Must complete by June 1, 2026"},
        ],
        "risks": [
            {
                "id": 1,
                "severity": "high",
                "title": "Missing Tax Exemption",
                "description": "The decree does not specify who claims the children "
                "as dependents for IRS/CRA purposes in alternating years.",
            },
            {
                "id": 2,
                "severity": "medium",
                "title": "Vague Exchange Location",
                "description": "Paragraph 4.2 states 'mutually agreed public place'. "
                "Recommendation: Specify a police station or school.",
            },
            {
                "id": 3,
                "severity": "low",
                "title": "Passport Provisions",
                "description": "No clause regarding possession of children's passports "
                "or travel notification requirements.",
            },
        ],
    }

    def __init__(self, delay_seconds: float = 0.0) -> None:
        self._delay_seconds = delay_seconds

    async def generate(
        self,
        *,
        model: str,
        temperature: float,
        prompt: str,
        document: EncodedDocument,
        json_schema: dict[str, object],
    ) -> str:
        _ = model, temperature, prompt, document, json_schema
        if self._delay_seconds > 0:
            await asyncio.sleep(self._delay_seconds)
        return json.dumps(self.DEFAULT_RESPONSE)
