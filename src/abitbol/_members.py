"""Member tables with lineage fallthrough"""

__all__ = ["MemberTable"]


_missing = object()


class MemberTable:
    """Instance-level members of a single class.

    Each class owns one table. Lookups that miss the table's own members
    continue into the parent table, so a subclass sees everything its
    ancestors define without copying it.

    Args:
        parent: (MemberTable | None) Table of the parent class

    Attributes:
        own: (dict) Members defined directly on this table
        parent: (MemberTable | None) Table consulted on a miss
    """

    __slots__ = ("own", "parent")

    def __init__(self, parent=None):
        self.own = {}
        self.parent = parent

    def __repr__(self):
        return f"MemberTable<{', '.join(self.own)}>"

    def chain(self):
        """Yield this table then each ancestor table, root-most last."""
        table = self
        while table is not None:
            yield table
            table = table.parent

    def lookup(self, name):
        """Find the nearest definition of a member.

        Args:
            name: (str) Member name

        Returns:
            (MemberTable, object) | None: Owning table and value, or None
        """
        for table in self.chain():
            value = table.own.get(name, _missing)
            if value is not _missing:
                return table, value
        return None

    def get(self, name, default=None):
        found = self.lookup(name)
        if found is None:
            return default
        return found[1]

    def __getitem__(self, name):
        found = self.lookup(name)
        if found is None:
            raise KeyError(name)
        return found[1]

    def __contains__(self, name):
        return self.lookup(name) is not None

    def __iter__(self):
        # Nearest definition first, each name once
        seen = set()
        for table in self.chain():
            for name in table.own:
                if name not in seen:
                    seen.add(name)
                    yield name

    def __len__(self):
        return sum(1 for _ in self)
