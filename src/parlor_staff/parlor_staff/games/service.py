from __future__ import annotations

import dataclasses
import logging
import uuid
from datetime import date, datetime
from typing import Any, Mapping, Optional

from ..common.datetime_utils import month_range, parse_iso_date, parse_iso_datetime
from ..common.validators import optional_int, require_int, require_max_length
from ..core.constants import DEFAULT_RANKING_LIMIT, DEFAULT_RESULT_LIMIT
from ..core.enums import GameType
from ..core.exceptions import ImmutableRecordError, NotFoundError, ValidationError
from ..settings.service import GameSettingsService
from ..users.repository import UserRepository
from .income import FeeTable, calculate_income, change_game_type, max_place
from .model import GameResult, GameResultList, SimpleBatch
from .ranking import average_place, build_ranking
from .repository import GameResultRepository, SimpleBatchRepository

logger = logging.getLogger(__name__)

NOTE_MAX = 255


def parse_game_type(value: Any, field_name: str = "gameType") -> GameType:
    try:
        return GameType(str(value).upper())
    except ValueError:
        raise ValidationError("gameType must be YONMA or SANMA", field=field_name)


def resolve_range(
    *, start_date: Optional[str], end_date: Optional[str], year_month: Optional[str], today: date
) -> tuple[date, date]:
    """Explicit start/end wins, then yearMonth, then the current month."""
    if start_date and end_date:
        start = parse_iso_date(start_date, "startDate")
        end = parse_iso_date(end_date, "endDate")
        if end < start:
            raise ValidationError("endDate must not be before startDate", field="endDate")
        return start, end
    if year_month:
        return month_range(year_month)
    return month_range(today.strftime("%Y-%m"))


class GameResultService:
    """Use cases around game results: CRUD, simple batches and rankings.

    ``tipIncome`` and ``totalIncome`` are never taken from the client; they are
    recomputed from the signed inputs and the owner's current GameSettings.
    """

    def __init__(
        self,
        results: GameResultRepository,
        batches: SimpleBatchRepository,
        settings: GameSettingsService,
        users: UserRepository,
    ):
        self._results = results
        self._batches = batches
        self._settings = settings
        self._users = users

    # ---- queries ----

    def list_results(self, *, user_id: int, start: date, end: date) -> GameResultList:
        rows = list(self._results.list_range(start=start, end=end, user_id=int(user_id)))
        # Totals cover the whole range; only the listed rows are capped.
        return GameResultList(
            user_id=int(user_id),
            average_place=average_place(rows),
            total_games=sum(1 for r in rows if r.counts_toward_places),
            total_income=sum(r.total_income for r in rows if r.counts_toward_income),
            results=rows[:DEFAULT_RESULT_LIMIT],
        )

    def get(self, *, user_id: int, result_id: int) -> GameResult:
        result = self._results.get_by_id(int(result_id))
        if not result or result.user_id != int(user_id):
            raise NotFoundError("Game result not found")
        return result

    def ranking(self, *, game_type: Any, start: date, end: date, current_user_id: Optional[int] = None) -> dict:
        gt = parse_game_type(game_type, "type")
        rows = self._results.list_range(start=start, end=end, game_type=gt)
        names = self._users.names_for(r.user_id for r in rows)
        items = build_ranking(rows, names)

        my_rank = None
        if current_user_id is not None:
            my_rank = next((i for i, item in enumerate(items, start=1) if item.user_id == int(current_user_id)), None)

        return {
            "ranking": [item.to_dict() for item in items[:DEFAULT_RANKING_LIMIT]],
            "myRank": my_rank,
            "totalPlayers": len(items),
        }

    # ---- writes ----

    def create(self, *, user_id: int, payload: Mapping[str, Any]) -> GameResult:
        errors: dict[str, str] = {}
        for key in ("gameType", "playedAt", "place", "baseIncome", "tipCount"):
            if payload.get(key) is None:
                errors[key] = f"{key} is required"
        if errors:
            raise ValidationError.from_errors(errors)

        values = self._parse(payload)
        batch_id = self._check_batch(user_id=user_id, batch_id=values.pop("simple_batch_id", None))

        draft = GameResult(
            result_id=0,
            user_id=int(user_id),
            tip_income=0,
            total_income=0,
            other_income=values.pop("other_income", 0),
            note=values.pop("note", ""),
            simple_batch_id=batch_id,
            **values,
        )
        result = self._recompute(draft)
        new_id = self._results.create(result)
        logger.info("Created game result id=%s user=%s type=%s", new_id, user_id, result.game_type.value)
        return dataclasses.replace(result, result_id=new_id)

    def replace(self, *, user_id: int, result_id: int, payload: Mapping[str, Any]) -> GameResult:
        missing = {
            key: f"{key} is required"
            for key in ("gameType", "playedAt", "place", "baseIncome", "tipCount")
            if payload.get(key) is None
        }
        if missing:
            raise ValidationError.from_errors(missing)
        return self.patch(user_id=user_id, result_id=result_id, payload=payload)

    def patch(self, *, user_id: int, result_id: int, payload: Mapping[str, Any]) -> GameResult:
        current = self._editable(user_id=user_id, result_id=result_id)
        values = self._parse(payload)
        values.pop("simple_batch_id", None)

        if "game_type" in values and "place" not in values and current.place is not None:
            values["place"] = change_game_type(values["game_type"], current.place)
        if "place" in values:
            self._check_place(values.get("game_type", current.game_type), values["place"])

        updated = self._recompute(dataclasses.replace(current, **values))
        self._results.update(updated)
        logger.info("Updated game result id=%s user=%s fields=%s", result_id, user_id, sorted(values))
        return updated

    def delete(self, *, user_id: int, result_id: int) -> None:
        self._editable(user_id=user_id, result_id=result_id)
        self._results.delete(result_id=int(result_id))
        logger.info("Deleted game result id=%s user=%s", result_id, user_id)

    # ---- simple batch ----

    def start_batch(self, *, user_id: int, payload: Mapping[str, Any]) -> SimpleBatch:
        store_id = require_int(payload.get("storeId"), "storeId", min_value=1)
        played_at = parse_iso_date(payload.get("playedAt") or "", "playedAt")

        batch = SimpleBatch(batch_id=uuid.uuid4().hex, user_id=int(user_id), store_id=store_id, played_at=played_at)
        self._batches.create(batch)
        logger.info("Started simple batch id=%s user=%s store=%s", batch.batch_id, user_id, store_id)
        return batch

    def finalize_batch(self, *, user_id: int, batch_id: str, payload: Mapping[str, Any]) -> GameResult:
        """Record the session's net income as one immutable final record."""
        batch = self._owned_batch(user_id=user_id, batch_id=batch_id)
        if batch.finalized:
            raise ImmutableRecordError("Simple batch is already finalized")

        errors: dict[str, str] = {}
        game_type = net = None
        try:
            game_type = parse_game_type(payload.get("gameType"))
        except ValidationError as e:
            errors.update(e.errors)
        try:
            net = require_int(payload.get("netIncome"), "netIncome")
        except ValidationError as e:
            errors.update(e.errors)
        if errors:
            raise ValidationError.from_errors(errors)

        final = GameResult(
            result_id=0,
            user_id=int(user_id),
            game_type=game_type,
            played_at=datetime.combine(batch.played_at, datetime.min.time()),
            place=None,
            base_income=net,
            tip_count=0,
            tip_income=0,
            other_income=0,
            total_income=net,
            simple_batch_id=batch.batch_id,
            store_id=batch.store_id,
            is_final_record=True,
        )
        new_id = self._batches.finalize(batch_id=batch.batch_id, final=final)
        if new_id is None:
            raise ImmutableRecordError("Simple batch is already finalized")
        logger.info("Finalized simple batch id=%s user=%s net=%s", batch.batch_id, user_id, net)
        return dataclasses.replace(final, result_id=new_id)

    def delete_batch(self, *, user_id: int, batch_id: str) -> int:
        batch = self._owned_batch(user_id=user_id, batch_id=batch_id)
        deleted = self._results.delete_by_batch(batch_id=batch.batch_id)
        self._batches.delete(batch_id=batch.batch_id)
        logger.info("Deleted simple batch id=%s user=%s records=%s", batch.batch_id, user_id, deleted)
        return deleted

    # ---- helpers ----

    def _recompute(self, result: GameResult) -> GameResult:
        if result.is_final_record:
            return result
        fees = FeeTable.from_settings(self._settings.get_or_create(result.user_id))
        income = calculate_income(
            game_type=result.game_type,
            place=result.place,
            base_income=result.base_income,
            tip_count=result.tip_count,
            other_income=result.other_income,
            fees=fees,
        )
        return dataclasses.replace(result, tip_income=income.tip_income, total_income=income.total_income)

    def _parse(self, payload: Mapping[str, Any]) -> dict[str, Any]:
        """Validate whichever known keys are present; collect errors per field."""
        values: dict[str, Any] = {}
        errors: dict[str, str] = {}

        def take(key: str, attr: str, parse) -> None:
            if key not in payload:
                return
            try:
                values[attr] = parse(payload[key])
            except ValidationError as e:
                errors.update(e.errors)

        take("gameType", "game_type", parse_game_type)
        take("playedAt", "played_at", lambda v: parse_iso_datetime(v, "playedAt"))
        take("place", "place", lambda v: require_int(v, "place", min_value=1))
        take("baseIncome", "base_income", lambda v: require_int(v, "baseIncome"))
        take("tipCount", "tip_count", lambda v: require_int(v, "tipCount"))
        take("otherIncome", "other_income", lambda v: optional_int(v, "otherIncome", min_value=0) or 0)
        take("note", "note", lambda v: require_max_length(str(v or ""), "note", NOTE_MAX))
        take("storeId", "store_id", lambda v: optional_int(v, "storeId", min_value=1))
        take("simpleBatchId", "simple_batch_id", lambda v: (str(v).strip() or None) if v is not None else None)

        if "place" in values and "game_type" in values and not errors:
            try:
                self._check_place(values["game_type"], values["place"])
            except ValidationError as e:
                errors.update(e.errors)

        if errors:
            raise ValidationError.from_errors(errors)
        return values

    @staticmethod
    def _check_place(game_type: GameType, place: int) -> None:
        limit = max_place(game_type)
        if not 1 <= place <= limit:
            raise ValidationError(f"place must be between 1 and {limit}", field="place")

    def _check_batch(self, *, user_id: int, batch_id: Optional[str]) -> Optional[str]:
        if not batch_id:
            return None
        batch = self._owned_batch(user_id=user_id, batch_id=batch_id)
        if batch.finalized:
            raise ImmutableRecordError("Simple batch is already finalized")
        return batch.batch_id

    def _owned_batch(self, *, user_id: int, batch_id: str) -> SimpleBatch:
        batch = self._batches.get(batch_id=str(batch_id))
        if not batch or batch.user_id != int(user_id):
            raise NotFoundError("Simple batch not found")
        return batch

    def _editable(self, *, user_id: int, result_id: int) -> GameResult:
        current = self.get(user_id=user_id, result_id=result_id)
        if current.is_final_record:
            raise ImmutableRecordError("Final records cannot be edited or deleted")
        return current
