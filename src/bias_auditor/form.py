from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterable, Optional

from .errors import AuditError, MissingCredential, UpstreamError, ValidationError
from .models import CUSTOM_DATASET, DEFAULT_ATTRIBUTES, DEFAULT_DATASETS, PROTECTED_ATTRIBUTES, AnalysisResult

logger = logging.getLogger(__name__)

# (description, attributes, api_key) -> result
AuditGateway = Callable[[str, list[str], str], AnalysisResult]


class FormStatus(str, Enum):
    """
    IDLE -> SUBMITTING -> SHOWING | FAILED

    SHOWING and FAILED go back to IDLE on reset(); FAILED may also be
    resubmitted directly from the configuration view.
    """
    IDLE = "idle"
    SUBMITTING = "submitting"
    SHOWING = "showing"
    FAILED = "failed"


def default_dataset_choice() -> str:
    return DEFAULT_DATASETS[0]["description"]


@dataclass
class AuditForm:
    """Session-held state of the configuration form and its one result."""

    default_api_key: str = ""
    dataset_choice: str = field(default_factory=default_dataset_choice)
    custom_dataset: str = ""
    attributes: set[str] = field(default_factory=lambda: set(DEFAULT_ATTRIBUTES))
    api_key: str = ""
    status: FormStatus = FormStatus.IDLE
    result: Optional[AnalysisResult] = None
    error: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.api_key:
            self.api_key = self.default_api_key

    @property
    def is_custom(self) -> bool:
        return self.dataset_choice == CUSTOM_DATASET

    @property
    def resolved_description(self) -> str:
        text = self.custom_dataset if self.is_custom else self.dataset_choice
        return (text or "").strip()

    @property
    def has_credential(self) -> bool:
        return bool(self.api_key.strip())

    @property
    def can_submit(self) -> bool:
        return (
            self.status is not FormStatus.SUBMITTING
            and self.has_credential
            and bool(self.attributes)
            and bool(self.resolved_description)
        )

    def selected_attributes(self, order: Optional[Iterable[str]] = None) -> list[str]:
        """Selected attributes in catalogue order (unknown labels last, sorted)."""
        catalogue = list(order) if order is not None else PROTECTED_ATTRIBUTES
        known = [a for a in catalogue if a in self.attributes]
        extra = sorted(a for a in self.attributes if a not in catalogue)
        return known + extra

    def toggle_attribute(self, attribute: str) -> None:
        if attribute in self.attributes:
            self.attributes.discard(attribute)
        else:
            self.attributes.add(attribute)

    def validate(self) -> None:
        """Raise the first failing guard, in the order the form shows them."""
        if not self.has_credential:
            raise MissingCredential()
        if not self.attributes:
            raise ValidationError("Please select at least one protected attribute to analyze.")
        if not self.resolved_description:
            raise ValidationError("Please describe your custom dataset or model.")

    def submit(self, gateway: AuditGateway) -> FormStatus:
        """Run one audit through `gateway` and move to SHOWING or FAILED."""
        if self.status is FormStatus.SUBMITTING:
            logger.debug("Ignoring submit while a request is outstanding")
            return self.status
        try:
            self.validate()
        except AuditError as e:
            self._fail(e)
            return self.status

        self.status = FormStatus.SUBMITTING
        self.error = None
        self.result = None
        try:
            result = gateway(self.resolved_description, self.selected_attributes(), self.api_key.strip())
        except AuditError as e:
            self._fail(e)
        except Exception as e:
            # Never leave the form stuck in SUBMITTING.
            logger.exception("Unexpected failure during audit request")
            self._fail(UpstreamError(str(e) or type(e).__name__))
        else:
            self.result = result
            self.status = FormStatus.SHOWING
        return self.status

    def _fail(self, err: AuditError) -> None:
        logger.info("Audit not shown: %s", type(err).__name__)
        self.result = None
        self.error = err.message
        self.status = FormStatus.FAILED

    def reset(self) -> None:
        """Back to IDLE with every field at its default."""
        self.dataset_choice = default_dataset_choice()
        self.custom_dataset = ""
        self.attributes = set(DEFAULT_ATTRIBUTES)
        self.api_key = self.default_api_key
        self.status = FormStatus.IDLE
        self.result = None
        self.error = None
