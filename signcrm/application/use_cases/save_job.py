"""
Save Job Use Case.

Creates a new job or replaces a stored one, applying the bookkeeping the
job form relies on: invoice/payment stamping, payment slot pruning and
the stage changelog.
"""

from dataclasses import dataclass
from datetime import datetime

from signcrm.application.use_cases.authorization import require_permission
from signcrm.config import get_logger, get_settings
from signcrm.core.entities.job import InvoiceDetails, Job, PaymentRecord
from signcrm.core.entities.user import PermissionAction, PermissionModule, User
from signcrm.core.exceptions import JobNotFoundError, TooManyPaymentsError
from signcrm.core.interfaces.job_store import IJobStore
from signcrm.core.services.stage_tracking import record_stage_change

logger = get_logger(__name__)


@dataclass
class SaveJobResult:
    """Result of saving a job."""

    job: Job
    created: bool
    stage_changed: bool = False


def stamp_invoice(
    invoice: InvoiceDetails, previous: InvoiceDetails, acting_user_id: str
) -> InvoiceDetails:
    """Attribute the invoice to ``acting_user_id`` when amount or date changed."""
    if invoice.amount != previous.amount or invoice.date != previous.date:
        return invoice.model_copy(update={"user_id": acting_user_id})
    return invoice.model_copy(update={"user_id": previous.user_id})


def stamp_payments(
    payments: list[PaymentRecord],
    previous: list[PaymentRecord],
    acting_user_id: str,
) -> list[PaymentRecord]:
    """
    Stamp changed payment slots and drop unset ones.

    Slots are compared by position with the stored job's payments. A
    slot reset to no amount and no date loses its user and is pruned.
    """
    stamped: list[PaymentRecord] = []
    for index, payment in enumerate(payments):
        old = previous[index] if index < len(previous) else PaymentRecord()
        if payment.is_unset:
            continue
        changed = payment.amount != old.amount or payment.date != old.date
        stamped.append(
            payment.model_copy(update={"user_id": acting_user_id if changed else old.user_id})
        )
    return stamped


class SaveJobUseCase:
    """
    Use case for saving a job from the job form.

    Flow:
    1. Validate payment slot count
    2. Create (jobs.create) or load the stored job (edit ownership rule)
    3. Stamp invoice and payments, prune unset slots
    4. Append a changelog entry when the stage changed
    5. Persist
    """

    def __init__(self, job_store: IJobStore, max_payment_slots: int | None = None):
        self._job_store = job_store
        if max_payment_slots is None:
            max_payment_slots = get_settings().pricing.max_payment_slots
        self._max_payment_slots = max_payment_slots

    def execute(
        self, job: Job, acting_user: User, now: datetime | None = None
    ) -> SaveJobResult:
        """
        Save ``job`` on behalf of ``acting_user``.

        Args:
            job: Complete job from the form. ``id`` None means a new job.
            acting_user: Logged-in user.
            now: Timestamp for a changelog entry; defaults to UTC now.

        Returns:
            SaveJobResult with the stored job.

        Raises:
            TooManyPaymentsError: More payment slots than allowed.
            JobNotFoundError: ``job.id`` is set but no such job is stored.
            PermissionDeniedError: The user may not create or edit it.
        """
        if len(job.payments) > self._max_payment_slots:
            raise TooManyPaymentsError(len(job.payments), self._max_payment_slots)

        if job.id is None:
            return self._create(job, acting_user)
        return self._update(job, acting_user, now)

    def _create(self, job: Job, acting_user: User) -> SaveJobResult:
        require_permission(acting_user, PermissionModule.JOBS, PermissionAction.CREATE)
        actor_id = acting_user.id or ""

        new_job = job.model_copy(
            update={
                "salesperson_id": acting_user.id,
                "changelog": [],
                "invoice_details": stamp_invoice(
                    job.invoice_details, InvoiceDetails(), actor_id
                ),
                "payments": stamp_payments(job.payments, [], actor_id),
            }
        )
        created = self._job_store.create_job(new_job)

        logger.info(
            "job_saved",
            job_id=created.id,
            created=True,
            user_id=acting_user.id,
            stage=created.stage.value,
        )
        return SaveJobResult(job=created, created=True)

    def _update(
        self, job: Job, acting_user: User, now: datetime | None
    ) -> SaveJobResult:
        stored = self._job_store.get_job(job.id)  # type: ignore[arg-type]
        if stored is None:
            raise JobNotFoundError(job.id or "")

        require_permission(
            acting_user, PermissionModule.JOBS, PermissionAction.EDIT, job=stored
        )
        actor_id = acting_user.id or ""

        # Stored salesperson and changelog win over whatever the form sent
        candidate = job.model_copy(
            update={
                "salesperson_id": stored.salesperson_id,
                "changelog": list(stored.changelog),
                "invoice_details": stamp_invoice(
                    job.invoice_details, stored.invoice_details, actor_id
                ),
                "payments": stamp_payments(job.payments, stored.payments, actor_id),
            }
        )
        changelog = record_stage_change(stored, candidate, actor_id, now=now)
        stage_changed = len(changelog) > len(stored.changelog)

        updated = self._job_store.update_job(
            candidate.model_copy(update={"changelog": changelog})
        )

        if stage_changed:
            logger.info(
                "stage_changed",
                job_id=updated.id,
                from_stage=stored.stage.value,
                to_stage=updated.stage.value,
                user_id=acting_user.id,
            )
        logger.info(
            "job_saved",
            job_id=updated.id,
            created=False,
            user_id=acting_user.id,
            stage=updated.stage.value,
        )
        return SaveJobResult(job=updated, created=False, stage_changed=stage_changed)
