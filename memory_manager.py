class SimulationStats:
    def __init__(self):
        self.access_count = 0
        self.fault_count = 0
        self.writeback_count = 0

    def record_access(self):
        # The access count doubles as the logical clock
        self.access_count += 1
        return self.access_count

    def record_fault(self, is_dirty_replacement=False):
        self.fault_count += 1
        if is_dirty_replacement:
            self.writeback_count += 1

    @property
    def hits(self):
        return self.access_count - self.fault_count

    @property
    def fault_rate(self):
        if self.access_count == 0:
            return 0.0
        return self.fault_count / self.access_count
