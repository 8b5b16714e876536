from __future__ import annotations

import dataclasses
from datetime import date, datetime, timedelta
from types import SimpleNamespace

import pytest
from werkzeug.security import generate_password_hash

from src.parlor_staff.parlor_staff.container import build_services
from src.parlor_staff.parlor_staff.core.enums import Role
from src.parlor_staff.parlor_staff.shift_board.diff_engine import ShiftTypeWindows
from src.parlor_staff.parlor_staff.shifts.night_hours import NightWindow
from src.parlor_staff.parlor_staff.special_wages.model import SpecialHourlyWage
from src.parlor_staff.parlor_staff.users.model import User

# 2026-03-10 is a Tuesday
TODAY = date(2026, 3, 10)


class FakeUserRepo:
    def __init__(self, users=()):
        self._users = {u.user_id: u for u in users}

    def get_by_id(self, user_id):
        return self._users.get(int(user_id))

    def get_by_login_id(self, login_id):
        return next((u for u in self._users.values() if u.login_id == login_id), None)

    def list_by_store(self, store_id):
        return [u for u in self._users.values() if u.store_id == int(store_id) and u.is_active]

    def names_for(self, user_ids):
        return {int(i): self._users[int(i)].name for i in user_ids if int(i) in self._users}


class FakeShiftRepo:
    def __init__(self):
        self._next_id = 1
        self.rows = {}

    def list_for_user(self, *, user_id, start, end):
        return [s for s in self.rows.values() if s.user_id == int(user_id) and start <= s.work_date <= end]

    def list_for_store(self, *, store_id, start, end):
        return [s for s in self.rows.values() if s.store_id == int(store_id) and start <= s.work_date <= end]

    def get_by_id(self, shift_id):
        return self.rows.get(int(shift_id))

    def create(self, shift):
        sid = self._next_id
        self._next_id += 1
        self.rows[sid] = dataclasses.replace(shift, shift_id=sid)
        return sid

    def update(self, shift):
        if shift.shift_id not in self.rows:
            return False
        self.rows[shift.shift_id] = shift
        return True

    def delete(self, *, shift_id):
        return self.rows.pop(int(shift_id), None) is not None


class FakeWageRepo:
    def __init__(self, wages=()):
        self._next_id = 100
        self.rows = {w.special_wage_id: w for w in wages}

    def list_all(self):
        return sorted(self.rows.values(), key=lambda w: w.special_wage_id)

    def get_by_id(self, special_wage_id):
        return self.rows.get(int(special_wage_id))

    def get_by_label(self, label):
        return next((w for w in self.rows.values() if w.label == label), None)

    def list_by_ids(self, ids):
        return [self.rows[int(i)] for i in ids if int(i) in self.rows]

    def create(self, *, label, hourly_wage):
        wid = self._next_id
        self._next_id += 1
        self.rows[wid] = SpecialHourlyWage(special_wage_id=wid, label=label, hourly_wage=hourly_wage)
        return wid

    def delete(self, *, special_wage_id):
        return self.rows.pop(int(special_wage_id), None) is not None


class FakeSettingsRepo:
    def __init__(self):
        self.rows = {}
        self.saves = 0

    def get_for_user(self, user_id):
        return self.rows.get(int(user_id))

    def save(self, settings):
        self.saves += 1
        self.rows[settings.user_id] = settings


class FakeResultRepo:
    def __init__(self):
        self._next_id = 1
        self.rows = {}

    def list_range(self, *, start, end, user_id=None, game_type=None):
        lo = datetime.combine(start, datetime.min.time())
        hi = datetime.combine(end + timedelta(days=1), datetime.min.time())
        out = [
            r
            for r in self.rows.values()
            if lo <= r.played_at < hi
            and (user_id is None or r.user_id == int(user_id))
            and (game_type is None or r.game_type == game_type)
        ]
        return sorted(out, key=lambda r: (r.played_at, r.result_id), reverse=True)

    def get_by_id(self, result_id):
        return self.rows.get(int(result_id))

    def create(self, result):
        rid = self._next_id
        self._next_id += 1
        self.rows[rid] = dataclasses.replace(result, result_id=rid)
        return rid

    def update(self, result):
        self.rows[result.result_id] = result
        return True

    def delete(self, *, result_id):
        return self.rows.pop(int(result_id), None) is not None

    def delete_by_batch(self, *, batch_id):
        ids = [rid for rid, r in self.rows.items() if r.simple_batch_id == batch_id]
        for rid in ids:
            del self.rows[rid]
        return len(ids)


class FakeBatchRepo:
    def __init__(self, results):
        self.rows = {}
        self._results = results

    def create(self, batch):
        self.rows[batch.batch_id] = batch

    def get(self, *, batch_id):
        return self.rows.get(batch_id)

    def finalize(self, *, batch_id, final):
        batch = self.rows.get(batch_id)
        if not batch or batch.finalized:
            return None
        new_id = self._results.create(final)
        self.rows[batch_id] = dataclasses.replace(batch, finalized=True)
        return new_id

    def delete(self, *, batch_id):
        return self.rows.pop(batch_id, None) is not None


class FakeAdvanceRepo:
    def __init__(self):
        self.rows = {}

    def get(self, *, user_id, year_month):
        return self.rows.get((int(user_id), year_month))

    def save(self, *, user_id, year_month, amount):
        self.rows[(int(user_id), year_month)] = int(amount)


class FakeRequirementRepo:
    def __init__(self):
        self.rows = {}

    def list_range(self, *, store_id, start, end):
        return [
            r for (sid, d, _), r in self.rows.items() if sid == int(store_id) and start <= d <= end
        ]

    def upsert(self, requirement):
        self.rows[(requirement.store_id, requirement.target_date, requirement.shift_type)] = requirement


@pytest.fixture
def users():
    return [
        User(1, "Admin", "admin", generate_password_hash("admin-pass"), Role.ADMIN, 1),
        User(2, "Aoi", "aoi", generate_password_hash("aoi-pass"), Role.MEMBER, 1),
        User(3, "Ren", "ren", generate_password_hash("ren-pass"), Role.MEMBER, 1),
        User(4, "Sora", "sora", generate_password_hash("sora-pass"), Role.MEMBER, 2),
    ]


@pytest.fixture
def repos(users):
    results = FakeResultRepo()
    return SimpleNamespace(
        users=FakeUserRepo(users),
        shifts=FakeShiftRepo(),
        wages=FakeWageRepo([SpecialHourlyWage(special_wage_id=7, label="Event night", hourly_wage=200)]),
        settings=FakeSettingsRepo(),
        results=results,
        batches=FakeBatchRepo(results),
        advances=FakeAdvanceRepo(),
        requirements=FakeRequirementRepo(),
    )


@pytest.fixture
def container(repos):
    return build_services(
        conn=None,
        users=repos.users,
        shifts=repos.shifts,
        wages=repos.wages,
        settings=repos.settings,
        results=repos.results,
        batches=repos.batches,
        advances=repos.advances,
        requirements=repos.requirements,
        window=NightWindow.default(),
        windows=ShiftTypeWindows.default(),
        advance_step=10000,
        today=lambda: TODAY,
    )


@pytest.fixture
def app(container, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    from src.parlor_staff.parlor_staff.main import create_app

    return create_app(container)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def login(client):
    def _login(user_id, role=Role.MEMBER, store_id=1):
        with client.session_transaction() as sess:
            sess["user_id"] = user_id
            sess["role"] = role.value
            sess["store_id"] = store_id

    return _login
