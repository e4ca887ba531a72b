"""Owner payout schedule and milestone progress.

Owners are paid in two stages: 70% of the rental amount once the Disney
confirmation is uploaded, and the remaining 30% after check-out. Each stage
is rounded independently, so the two amounts can differ from the total by a
cent.
"""

from decimal import ROUND_HALF_UP, Decimal
from functools import lru_cache
from typing import Any, Iterable, Optional

from pydantic import ValidationError

from dvc_pricing.models import (
    InvalidPayoutStageError,
    MilestoneCode,
    MilestoneProgress,
    MilestoneRow,
    MilestoneStatus,
    MilestoneStep,
    OwnerAction,
    PayoutAmount,
    PayoutStage,
)
from dvc_pricing.utils.logging import get_logger

logger = get_logger(__name__)

MILESTONE_SEQUENCE: list[MilestoneStep] = [
    MilestoneStep(code=MilestoneCode.MATCHED, label="Matched"),
    MilestoneStep(code=MilestoneCode.GUEST_VERIFIED, label="Guest info complete"),
    MilestoneStep(code=MilestoneCode.PAYMENT_VERIFIED, label="Deposit confirmed"),
    MilestoneStep(code=MilestoneCode.OWNER_BOOKED, label="Booking completed"),
    MilestoneStep(
        code=MilestoneCode.DISNEY_CONFIRMATION_UPLOADED, label="Disney confirmation uploaded"
    ),
    MilestoneStep(code=MilestoneCode.PAYOUT_70_RELEASED, label="Deposit payout (70%)"),
    MilestoneStep(code=MilestoneCode.CHECK_IN, label="Check-in"),
    MilestoneStep(code=MilestoneCode.PAYOUT_30_RELEASED, label="Balance payout (30%)"),
    MilestoneStep(code=MilestoneCode.CHECK_OUT, label="Check-out"),
]

OWNER_ACTIONS: dict[str, OwnerAction] = {
    "approve": OwnerAction(
        key="approve",
        label="Approve booking package",
        description="Confirm the booking package and agreement details.",
    ),
    "awaiting": OwnerAction(
        key="awaiting",
        label="Awaiting verification",
        description="We're finalizing guest verification and payment details.",
    ),
    "uploadConfirmation": OwnerAction(
        key="uploadConfirmation",
        label="Upload Disney confirmation",
        description="Upload the Disney confirmation email to trigger the 70% payout.",
    ),
}

# Milestones that must be completed before the owner can approve
APPROVAL_PREREQUISITES: list[MilestoneCode] = [
    MilestoneCode.GUEST_VERIFIED,
    MilestoneCode.PAYMENT_VERIFIED,
]

# Milestone whose completion releases each payout stage
PAYOUT_TRIGGERS: dict[MilestoneCode, PayoutStage] = {
    MilestoneCode.DISNEY_CONFIRMATION_UPLOADED: PayoutStage.DEPOSIT,
    MilestoneCode.CHECK_OUT: PayoutStage.BALANCE,
}


def _as_milestone_code(code: MilestoneCode | str) -> Optional[MilestoneCode]:
    try:
        return MilestoneCode(code)
    except ValueError:
        return None


class PayoutScheduleService:
    """Service for payout stages and the owner's milestone timeline."""

    def get_payout_stage_for_milestone(
        self, code: MilestoneCode | str
    ) -> Optional[PayoutStage]:
        """Payout stage released by a milestone.

        Args:
            code: Milestone code; unknown codes release nothing

        Returns:
            PayoutStage.DEPOSIT (70), PayoutStage.BALANCE (30) or None
        """
        milestone = _as_milestone_code(code)
        if milestone is None:
            return None
        return PAYOUT_TRIGGERS.get(milestone)

    def calculate_payout_amount_cents(
        self,
        total_cents: Optional[int],
        stage: PayoutStage | int,
    ) -> int:
        """Amount released for a stage, rounded half up to the cent.

        A missing or non-positive total pays nothing.

        Raises:
            InvalidPayoutStageError: If stage is not 70 or 30.
        """
        try:
            payout_stage = PayoutStage(stage)
        except ValueError:
            raise InvalidPayoutStageError(details={"stage": str(stage)}) from None

        if total_cents is None or total_cents <= 0:
            return 0

        amount = Decimal(total_cents) * Decimal(payout_stage.value) / Decimal(100)
        return int(amount.quantize(Decimal(1), rounding=ROUND_HALF_UP))

    def get_payout_amount(self, total_cents: Optional[int], stage: PayoutStage | int) -> PayoutAmount:
        """Payout amount wrapped with its stage and base total."""
        amount_cents = self.calculate_payout_amount_cents(total_cents, stage)
        return PayoutAmount(
            stage=PayoutStage(stage),
            total_cents=total_cents or 0,
            amount_cents=amount_cents,
        )

    def normalize_milestones(
        self, rows: Optional[Iterable[dict[str, Any]]] = None
    ) -> list[MilestoneRow]:
        """Validate raw milestone rows, dropping ones with unknown codes."""
        milestones: list[MilestoneRow] = []
        for row in rows or []:
            try:
                milestones.append(MilestoneRow.model_validate(row))
            except ValidationError:
                logger.warning(f"Ignoring unrecognised milestone row: {row!r}")
        return milestones

    def get_milestone_label(self, code: MilestoneCode | str) -> str:
        """Display label for a milestone; the raw code when it has none."""
        for step in MILESTONE_SEQUENCE:
            if step.code == code:
                return step.label
        return code.value if isinstance(code, MilestoneCode) else str(code)

    def get_milestone_status(
        self, code: MilestoneCode, milestones: list[MilestoneRow]
    ) -> MilestoneStatus:
        """Recorded status of a milestone, pending when not recorded."""
        for milestone in milestones:
            if milestone.code == code:
                return milestone.status
        return MilestoneStatus.PENDING

    def get_missing_approval_prerequisites(
        self, milestones: list[MilestoneRow]
    ) -> list[MilestoneCode]:
        return [
            code
            for code in APPROVAL_PREREQUISITES
            if self.get_milestone_status(code, milestones) is not MilestoneStatus.COMPLETED
        ]

    def build_milestone_progress(self, milestones: list[MilestoneRow]) -> MilestoneProgress:
        """Completed share of the timeline, as a whole percentage."""
        total = len(MILESTONE_SEQUENCE)
        completed = sum(
            1
            for step in MILESTONE_SEQUENCE
            if self.get_milestone_status(step.code, milestones) is MilestoneStatus.COMPLETED
        )
        percent = 0
        if total:
            share = Decimal(completed) * 100 / Decimal(total)
            percent = int(share.quantize(Decimal(1), rounding=ROUND_HALF_UP))
        return MilestoneProgress(completed=completed, total=total, percent=percent)

    def get_next_owner_action(self, milestones: list[MilestoneRow]) -> Optional[OwnerAction]:
        """What the owner should do next, or None when nothing is pending.

        Approval waits on guest and payment verification; after approval the
        owner uploads the Disney confirmation.
        """
        approval = self.get_milestone_status(MilestoneCode.OWNER_APPROVED, milestones)
        if approval is not MilestoneStatus.COMPLETED:
            if self.get_missing_approval_prerequisites(milestones):
                return OWNER_ACTIONS["awaiting"]
            return OWNER_ACTIONS["approve"]

        confirmation = self.get_milestone_status(
            MilestoneCode.DISNEY_CONFIRMATION_UPLOADED, milestones
        )
        if confirmation is not MilestoneStatus.COMPLETED:
            return OWNER_ACTIONS["uploadConfirmation"]
        return None


@lru_cache(maxsize=1)
def get_payout_schedule_service() -> PayoutScheduleService:
    """Get the process-wide payout schedule service."""
    return PayoutScheduleService()
