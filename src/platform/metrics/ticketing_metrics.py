from prometheus_client import Counter, Gauge, Histogram


class TicketingMetrics:
    """
    Ticketing System Core Metrics Collector

    Tracks booking admission outcomes and the reminder job
    """

    def __init__(self):
        # ========== Booking Metrics ==========
        self.booking_requests = Counter(
            'booking_requests_total',
            'Total booking attempts by outcome',
            ['result'],  # success, cancelled, error or a BookingErrorCode value
        )

        self.booking_duration = Histogram(
            'booking_duration_seconds',
            'Booking processing time, lock wait included',
            buckets=[0.005, 0.01, 0.05, 0.1, 0.2, 0.5, 1.0, 2.0, 5.0],
        )

        self.event_locks_active = Gauge(
            'event_locks_active', 'Events with an in-flight booking holding or awaiting a lock'
        )

        # ========== Reminder Job Metrics ==========
        self.reminders_sent = Counter('reminders_sent_total', 'Reminder notifications sent')

        self.reminder_runs = Counter(
            'reminder_runs_total', 'Reminder job runs by outcome', ['result']
        )

    # ========== Helper Methods ==========

    def record_booking(self, *, result: str, duration: float, active_locks: int):
        self.booking_requests.labels(result=result).inc()
        self.booking_duration.observe(duration)
        self.event_locks_active.set(active_locks)

    def record_reminder_run(self, *, result: str, sent: int = 0):
        self.reminder_runs.labels(result=result).inc()
        if sent:
            self.reminders_sent.inc(sent)


# Global metrics instance
metrics = TicketingMetrics()
