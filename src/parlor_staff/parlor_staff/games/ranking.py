from __future__ import annotations

from typing import Iterable, Mapping, Optional

from .model import GameResult, RankingItem


def average_place(results: Iterable[GameResult]) -> Optional[float]:
    places = [r.place for r in results if r.counts_toward_places]
    if not places:
        return None
    return round(sum(places) / len(places), 2)


def build_ranking(results: Iterable[GameResult], names: Mapping[int, str]) -> list[RankingItem]:
    """Per-user income / game count / average place, best income first."""
    by_user: dict[int, list[GameResult]] = {}
    for r in results:
        by_user.setdefault(r.user_id, []).append(r)

    items = []
    for user_id, rows in by_user.items():
        items.append(
            RankingItem(
                user_id=user_id,
                name=names.get(user_id, f"#{user_id}"),
                total_income=sum(r.total_income for r in rows if r.counts_toward_income),
                game_count=sum(1 for r in rows if r.counts_toward_places),
                average_place=average_place(rows),
            )
        )

    items.sort(key=lambda x: (-x.total_income, x.average_place if x.average_place is not None else 99, x.user_id))
    return items
