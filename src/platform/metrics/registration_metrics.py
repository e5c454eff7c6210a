from prometheus_client import Counter, Histogram


class RegistrationMetrics:
    """
    Registration and inventory business metrics, exposed at /metrics.

    Labels stay low-cardinality on purpose: no user/event/ticket ids.
    """

    def __init__(self) -> None:
        # ========== Registration Metrics ==========
        self.registration_attempts = Counter(
            'attendee_registration_attempts_total',
            'Attendee registration attempts',
            ['result'],  # created/duplicate/not_found
        )

        self.attendee_status_changes = Counter(
            'attendee_status_changes_total',
            'Attendee status overwrites',
            ['status'],
        )

        # ========== Inventory Metrics ==========
        self.inventory_adjustments = Counter(
            'ticket_inventory_adjustments_total',
            'Relative ticket quantity adjustments',
            ['direction', 'result'],  # direction: increase/decrease, result: applied/rejected
        )

        self.inventory_adjustment_amount = Histogram(
            'ticket_inventory_adjustment_amount',
            'Ticket amount per applied adjustment',
            ['direction'],
            buckets=[1, 2, 5, 10, 25, 50, 100, 250, 1000],
        )

    # ========== Helper Methods ==========

    def record_registration(self, *, result: str) -> None:
        self.registration_attempts.labels(result=result).inc()

    def record_status_change(self, *, status: str) -> None:
        self.attendee_status_changes.labels(status=status).inc()

    def record_inventory_adjustment(self, *, direction: str, result: str, amount: int) -> None:
        self.inventory_adjustments.labels(direction=direction, result=result).inc()
        if result == 'applied':
            self.inventory_adjustment_amount.labels(direction=direction).observe(amount)


# Global metrics instance
metrics = RegistrationMetrics()
