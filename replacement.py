import random


POLICY_NAMES = {
    'fifo': 'FIFO',
    'lru': 'LRU',
    '2a': 'Second Chance',
    'random': 'Random',
}


class FIFOPolicy:
    name = 'FIFO'

    def __init__(self):
        self.next_frame = 0

    def select_victim(self, frame_table):
        # Cold fills and evictions share this cursor, so eviction order is arrival order
        victim_frame = self.next_frame
        self.next_frame = (self.next_frame + 1) % len(frame_table)
        return victim_frame


class LRUPolicy:
    name = 'LRU'

    def select_victim(self, frame_table):
        lru_time = float('inf')
        victim_frame = 0

        for frame_num in range(len(frame_table)):
            frame = frame_table[frame_num]
            if frame.last_access < lru_time:
                lru_time = frame.last_access
                victim_frame = frame_num

        return victim_frame


class SecondChancePolicy:
    name = 'Second Chance'

    def __init__(self):
        self.clock_hand = 0

    def select_victim(self, frame_table):
        num_frames = len(frame_table)
        while True:
            frame = frame_table[self.clock_hand]
            if not frame.referenced:
                victim_frame = self.clock_hand
                self.clock_hand = (self.clock_hand + 1) % num_frames
                return victim_frame
            frame.referenced = False
            self.clock_hand = (self.clock_hand + 1) % num_frames


class RandomPolicy:
    name = 'Random'

    def __init__(self, random_seed=None):
        self.rng = random.Random(random_seed)

    def select_victim(self, frame_table):
        return self.rng.randint(0, len(frame_table) - 1)


def make_policy(algorithm, random_seed=None):
    """Build a fresh replacement policy for one simulation run.

    'fifo', 'lru' and '2a' pick their policy (exact match); any other name
    falls back to Random. Returns (policy, recognized).
    """

    if algorithm == 'fifo':
        return FIFOPolicy(), True
    elif algorithm == 'lru':
        return LRUPolicy(), True
    elif algorithm == '2a':
        return SecondChancePolicy(), True
    return RandomPolicy(random_seed), algorithm == 'random'
