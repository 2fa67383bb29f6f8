WRITE = 'W'


class Frame:
    def __init__(self, frame_index):
        self.frame_index = frame_index
        self.resident_page = None  # None means empty, never page 0
        self.dirty = False
        self.referenced = False
        self.last_access = 0

    def is_empty(self):
        return self.resident_page is None

    def __repr__(self):
        return (f"Frame({self.frame_index}, page={self.resident_page}, "
                f"dirty={self.dirty}, ref={self.referenced}, t={self.last_access})")


class FrameTable:
    def __init__(self, num_frames):
        if num_frames < 1:
            raise ValueError(f"Frame table needs at least one frame, got {num_frames}")
        self.num_frames = num_frames
        self.frames = [Frame(i) for i in range(num_frames)]

    def __len__(self):
        return self.num_frames

    def __getitem__(self, index):
        return self.frames[index]

    def find(self, page):
        for i, frame in enumerate(self.frames):
            if not frame.is_empty() and frame.resident_page == page:
                return i
        return None

    def load(self, index, page, operation, clock):
        frame = self.frames[index]
        frame.resident_page = page
        frame.last_access = clock
        frame.referenced = True
        frame.dirty = (operation == WRITE)

    def touch(self, index, operation, clock):
        frame = self.frames[index]
        frame.last_access = clock
        frame.referenced = True
        if operation == WRITE:
            frame.dirty = True

    def resident_pages(self):
        return [frame.resident_page for frame in self.frames if not frame.is_empty()]


def frame_count(memory_size, page_size):
    """Number of physical frames for a memory of `memory_size` split into
    pages of `page_size` (same unit for both).

    Uneven splits are rejected instead of silently truncated.
    """
    if page_size <= 0 or memory_size <= 0:
        raise ValueError("Page size and memory size must be positive")
    if memory_size % page_size != 0:
        raise ValueError(
            f"Memory size {memory_size} is not a multiple of page size {page_size}")
    return memory_size // page_size
