from __future__ import annotations

class NotificationAggregationError(RuntimeError):

    def __init__(self, source: str) -> None:
        super().__init__(f"Notification source '{source}' could not be read.")
        self.source = source
