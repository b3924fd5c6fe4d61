import logging
from typing import Any, Dict, Iterable, Optional

from pydantic import ValidationError

from ..ports.notifier import Notifier
from ..ports.resource_gateway import ResourceGateway
from .list_controller import ResourceListController
from .modal_manager import EDITABLE_MODES, ModalLifecycleManager, ModalMode
from ...exceptions import (
    GatewayFailure,
    ModalStateError,
    ValidationFailure,
    normalize_errors,
    validation_errors_from_pydantic,
)
from ...resources import ResourceDefinition

logger = logging.getLogger(__name__)


class ResourcePage:
    """One dashboard page: a resource list, its modal and the round-trips between them.

    Failures never escape a page operation; they end up as toasts or as field
    errors on the open modal. Mutations are never applied locally: a successful
    one is followed by a full refresh of the list.
    """

    def __init__(self, definition: ResourceDefinition, gateway: ResourceGateway, notifier: Notifier, items: Iterable[Any] = ()):
        self.definition = definition
        self.gateway = gateway
        self.notifier = notifier
        self.list = ResourceListController(items, definition.search_fields, definition.filters)
        self.modal = ModalLifecycleManager(definition.default_draft)
        self.loading = False
        self.mounted = True
        self._refresh_seq = 0

    @property
    def title_label(self) -> str:
        label = self.definition.label
        return label[:1].upper() + label[1:]

    def _require_editable(self) -> None:
        if self.definition.read_only:
            raise ModalStateError(f"{self.definition.plural} are read-only")

    def _modal_unchanged(self, session: int) -> bool:
        return self.mounted and self.modal.session == session

    # modal shortcuts

    def open_add(self) -> None:
        self._require_editable()
        self.modal.open_add()

    def open_edit(self, entity: Any) -> None:
        self._require_editable()
        self.modal.open_edit(entity)

    def open_view(self, entity: Any) -> None:
        self.modal.open_view(entity)

    def open_delete(self, entity: Any) -> None:
        self._require_editable()
        self.modal.open_delete(entity)

    def cancel(self) -> None:
        self.modal.cancel()

    def unmount(self) -> None:
        self.mounted = False
        self.modal.close()

    @property
    def empty_state_message(self) -> Optional[str]:
        if self.list.visible_items:
            return None
        if not self.list.items:
            return f"No {self.definition.plural} yet"
        return f"No {self.definition.plural} match your search or filters"

    # round-trips

    async def refresh(self) -> bool:
        self._refresh_seq += 1
        seq = self._refresh_seq
        try:
            items = await self.gateway.list()
        except GatewayFailure as e:
            logger.error(f"Error loading {self.definition.plural}: {e.message}")
            if self.mounted and seq == self._refresh_seq:
                self.notifier.error(f"Failed to load {self.definition.plural}")
            return False
        if not self.mounted or seq != self._refresh_seq:
            logger.debug(f"Discarding stale {self.definition.name} list response")
            return False
        self.list.replace(items)
        return True

    def validate_draft(self) -> Optional[Dict[str, Any]]:
        """Run the client-side rules; returns the request payload or None when the draft is invalid"""
        try:
            form = self.definition.form.model_validate(self.modal.draft)
        except ValidationError as e:
            self.modal.set_errors(normalize_errors(validation_errors_from_pydantic(e.errors(), skip_prefixes=())))
            return None
        self.modal.clear_errors()
        return form.payload(clear_blanks=self.modal.mode == ModalMode.EDITING)

    async def submit(self) -> bool:
        self._require_editable()
        if self.modal.mode not in EDITABLE_MODES:
            raise ModalStateError(f"Nothing to submit while modal is {self.modal.mode.value}")
        if self.loading:
            logger.debug(f"Ignoring duplicate {self.definition.label} submission")
            return False

        payload = self.validate_draft()
        if payload is None:
            return False

        editing = self.modal.mode == ModalMode.EDITING
        verb = "update" if editing else "create"
        session = self.modal.session
        self.loading = True
        try:
            if editing:
                result = await self.gateway.update(self.modal.target.id, payload)
            else:
                result = await self.gateway.create(payload)
        except ValidationFailure as e:
            if self._modal_unchanged(session):
                self.modal.merge_errors(e.errors)
                self.notifier.error(e.message)
            return False
        except GatewayFailure as e:
            logger.error(f"Error trying to {verb} {self.definition.label}: {e.message}")
            if self.mounted:
                self.notifier.error(f"Failed to {verb} {self.definition.label}")
            return False
        finally:
            self.loading = False

        if not self.mounted:
            return True
        self.notifier.success(result.message or f"{self.title_label} {verb}d successfully")
        if self.modal.session == session:
            self.modal.close()
        await self.refresh()
        return True

    async def confirm_delete(self) -> bool:
        self._require_editable()
        if self.modal.mode != ModalMode.CONFIRMING_DELETE:
            raise ModalStateError(f"No deletion to confirm while modal is {self.modal.mode.value}")
        if self.loading:
            return False

        target = self.modal.target
        session = self.modal.session
        self.loading = True
        try:
            result = await self.gateway.delete(target.id)
        except GatewayFailure as e:
            logger.error(f"Error deleting {self.definition.label} {target.id}: {e.message}")
            if self.mounted:
                self.notifier.error(f"Failed to delete {self.definition.label}")
            return False
        finally:
            self.loading = False

        if not self.mounted:
            return True
        self.notifier.success(result.message or f"{self.title_label} deleted successfully")
        if self.modal.session == session:
            self.modal.close()
        await self.refresh()
        return True

    async def change_status(self, entity: Any, status: str) -> bool:
        """Quick status action from a row, outside any modal"""
        self._require_editable()
        if self.loading:
            return False
        self.loading = True
        try:
            result = await self.gateway.update(entity.id, {"status": status})
        except ValidationFailure as e:
            if self.mounted:
                self.notifier.error(e.errors.get("status") or e.message)
            return False
        except GatewayFailure as e:
            logger.error(f"Error changing status of {self.definition.label} {entity.id}: {e.message}")
            if self.mounted:
                self.notifier.error(f"Failed to update {self.definition.label}")
            return False
        finally:
            self.loading = False

        if not self.mounted:
            return True
        self.notifier.success(result.message or f"{self.title_label} updated successfully")
        await self.refresh()
        return True
