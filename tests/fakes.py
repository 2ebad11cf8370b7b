# tests/fakes.py

"""In-memory stand-in for the supabase query builder"""

import copy
import re

import httpx
from postgrest.exceptions import APIError


def api_error(message="boom", code="500"):
    return APIError({"message": message, "code": code, "hint": None, "details": None})


def connection_error(message="connection refused"):
    return httpx.ConnectError(message)


def _lookup(row, column):
    value = row
    for part in column.split("."):
        if not isinstance(value, dict):
            return None
        value = value.get(part)
    return value


def _like(value, pattern):
    regex = "^" + ".*".join(re.escape(p) for p in str(pattern).split("%")) + "$"
    return value is not None and re.match(regex, str(value), re.IGNORECASE) is not None


class FakeResponse:
    def __init__(self, data, count=None):
        self.data = data
        self.count = count


class FakeQuery:
    def __init__(self, client, table):
        self.client = client
        self.table_name = table
        self.action = "select"
        self.columns = "*"
        self.payload = None
        self.on_conflict = None
        self.filters = []
        self.ordering = []
        self.row_limit = None
        self.mode = None
        self.count = None
        self.head = False

    # -- actions --

    def select(self, columns="*", count=None, head=False):
        self.columns = columns
        self.count = count
        self.head = head
        return self

    def insert(self, payload):
        self.action, self.payload = "insert", payload
        return self

    def upsert(self, payload, on_conflict=None):
        self.action, self.payload, self.on_conflict = "upsert", payload, on_conflict
        return self

    def update(self, values):
        self.action, self.payload = "update", values
        return self

    def delete(self):
        self.action = "delete"
        return self

    # -- filters --

    def eq(self, column, value):
        self.filters.append(lambda row: _lookup(row, column) == value)
        return self

    def ilike(self, column, pattern):
        self.filters.append(lambda row: _like(_lookup(row, column), pattern))
        return self

    def in_(self, column, values):
        values = list(values)
        self.filters.append(lambda row: _lookup(row, column) in values)
        return self

    def or_(self, expression):
        clauses = []
        for clause in expression.split(","):
            column, op, value = clause.split(".", 2)
            assert op == "eq", f"unsupported or_ operator {op}"
            clauses.append((column, value))
        self.filters.append(lambda row: any(str(_lookup(row, c)) == v for c, v in clauses))
        return self

    def order(self, column, desc=False):
        self.ordering.append((column, desc))
        return self

    def limit(self, n):
        self.row_limit = n
        return self

    def single(self):
        self.mode = "single"
        return self

    def maybe_single(self):
        self.mode = "maybe_single"
        return self

    # -- execution --

    def _matching(self):
        return [r for r in self.client.tables.setdefault(self.table_name, []) if all(f(r) for f in self.filters)]

    def execute(self):
        self.client.calls.append(self)
        error = self.client.error_for(self)
        if error is not None:
            raise error

        if self.action == "insert":
            rows = self.payload if isinstance(self.payload, list) else [self.payload]
            self.client.tables.setdefault(self.table_name, []).extend(copy.deepcopy(rows))
            return FakeResponse(copy.deepcopy(rows))

        if self.action == "upsert":
            rows = self.payload if isinstance(self.payload, list) else [self.payload]
            keys = self.on_conflict.split(",") if self.on_conflict else ["id"]
            table = self.client.tables.setdefault(self.table_name, [])
            for row in rows:
                existing = None
                if all(row.get(k) is not None for k in keys):
                    existing = next((r for r in table if all(r.get(k) == row.get(k) for k in keys)), None)
                if existing is not None:
                    existing.update(copy.deepcopy(row))
                else:
                    table.append(copy.deepcopy(row))
            return FakeResponse(copy.deepcopy(rows))

        if self.action == "update":
            rows = self._matching()
            for row in rows:
                row.update(copy.deepcopy(self.payload))
            return FakeResponse(copy.deepcopy(rows))

        if self.action == "delete":
            rows = self._matching()
            self.client.tables[self.table_name] = [r for r in self.client.tables[self.table_name] if r not in rows]
            return FakeResponse(copy.deepcopy(rows))

        rows = self._matching()
        for column, desc in reversed(self.ordering):
            rows = sorted(rows, key=lambda r: (_lookup(r, column) is None, _lookup(r, column) or ""), reverse=desc)
        total = len(rows)
        if self.row_limit is not None:
            rows = rows[:self.row_limit]
        rows = copy.deepcopy(rows)

        if self.mode == "single":
            if len(rows) != 1:
                raise APIError({"message": "JSON object requested, multiple (or no) rows returned",
                                "code": "PGRST116", "hint": None, "details": None})
            return FakeResponse(rows[0])
        if self.mode == "maybe_single":
            if not rows:
                return None
            return FakeResponse(rows[0])

        count = total if self.count else None
        return FakeResponse([] if self.head else rows, count)


class FakeClient:
    """
    Tables are plain lists of dicts. Embedded relations are stored on the
    rows themselves (e.g. {"students": {"class_name": "5A"}}).
    """

    def __init__(self, tables=None):
        self.tables = copy.deepcopy(tables or {})
        self.calls = []
        self.errors = []

    def table(self, name):
        return FakeQuery(self, name)

    def fail(self, table, error=None, action=None, columns=None):
        """Raise error for matching queries on table"""
        self.errors.append((table, action, columns, error or api_error()))

    def error_for(self, query):
        for table, action, columns, error in self.errors:
            if table != query.table_name:
                continue
            if action is not None and action != query.action:
                continue
            if columns is not None and columns != query.columns:
                continue
            return error
        return None

    def calls_to(self, table, action=None):
        return [c for c in self.calls if c.table_name == table and (action is None or c.action == action)]


class FakeSessionState(dict):
    """Dict with the attribute access st.session_state offers"""

    def __getattr__(self, name):
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name)

    def __setattr__(self, name, value):
        self[name] = value


class FakeCookies(dict):
    """Cookie manager that counts save() calls"""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.saves = 0

    def save(self):
        self.saves += 1
