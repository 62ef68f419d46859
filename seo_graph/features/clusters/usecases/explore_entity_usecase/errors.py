"""Custom exceptions for the explore entity use case."""

from seo_graph.features.clusters.dtos.cluster_dto import NotificationDto


class ExpansionFailedError(RuntimeError):
    """Raised when the store could not be read while expanding a node."""

    def __init__(
        self,
        entity_id: str,
        reason: str | None = None,
        notification: NotificationDto | None = None,
    ):
        self.entity_id: str = entity_id
        self.reason: str | None = reason
        self.notification: NotificationDto | None = notification
        super().__init__(
            f"Failed to expand '{entity_id}'" + (f": {reason}" if reason else "")
        )


class StaleExpansionError(RuntimeError):
    """Raised when a newer expansion of the same node superseded this one."""

    def __init__(self, entity_id: str, generation: int, latest: int):
        self.entity_id: str = entity_id
        self.generation: int = generation
        self.latest: int = latest
        super().__init__(
            f"Expansion {generation} of '{entity_id}' was superseded by {latest}"
        )
