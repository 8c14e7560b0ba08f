import logging
from collections import OrderedDict
from typing import Callable, List, Optional

from app.schemas.balances import Balance
from app.services.balance_service import classify
from app.services.expenses_client import ExpensesClient

logger = logging.getLogger("splito.snapshots")

Subscriber = Callable[[str, List[Balance]], None]


class SnapshotStore:
    """
    The current balance snapshot of each group.

    A refresh replaces a group's snapshot as a whole and then tells the
    subscribers; nothing ever edits a stored snapshot in place. Only the
    ``max_groups`` most recently refreshed groups are kept.
    """

    def __init__(self, client: ExpensesClient, max_groups: int = 256):
        self._client = client
        self._max_groups = max_groups
        self._snapshots: "OrderedDict[str, List[Balance]]" = OrderedDict()
        self._subscribers: List[Subscriber] = []

    def __len__(self):
        return len(self._snapshots)

    def current(self, group_id: str) -> Optional[List[Balance]]:
        return self._snapshots.get(group_id)

    async def refresh(self, group_id: str, token: str) -> List[Balance]:
        balances = await self._client.get_group_balances(group_id, token)
        self.replace(group_id, balances)
        return balances

    def replace(self, group_id: str, balances: List[Balance]):
        snapshot = list(balances)
        self._snapshots[group_id] = snapshot
        self._snapshots.move_to_end(group_id)

        while len(self._snapshots) > self._max_groups:
            evicted, _ = self._snapshots.popitem(last=False)
            logger.debug("Snapshot evicted | group=%s", evicted)

        for callback in list(self._subscribers):
            callback(group_id, snapshot)

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        self._subscribers.append(callback)
        return lambda: self.unsubscribe(callback)

    def unsubscribe(self, callback: Subscriber):
        if callback in self._subscribers:
            self._subscribers.remove(callback)


def log_snapshot(group_id: str, balances: List[Balance]):
    partition = classify(balances)
    logger.debug(
        "Snapshot replaced | group=%s debtors=%d creditors=%d settled=%d",
        group_id, len(partition.debtors), len(partition.creditors), len(partition.settled),
    )
