from memory_manager import SimulationStats


def test_counters_start_at_zero():
    stats = SimulationStats()
    assert stats.access_count == 0
    assert stats.hits == 0
    assert stats.fault_rate == 0.0


def test_record_fault_and_rate():
    stats = SimulationStats()
    assert stats.record_access() == 1
    assert stats.record_access() == 2
    stats.record_fault(is_dirty_replacement=True)
    assert stats.fault_count == 1
    assert stats.writeback_count == 1
    assert stats.hits == 1
    assert stats.fault_rate == 0.5
