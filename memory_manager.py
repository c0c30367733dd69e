class FrameTableEntry:
    def __init__(self, frame_number):
        self.frame_number = frame_number
        self.occupied = False
        self.resident_page = None
        self.dirty = False
        self.load_time = -1  # For FIFO
        self.last_access_time = -1  # For LRU

    def install(self, page_number, current_time, is_write):
        self.occupied = True
        self.resident_page = page_number
        self.load_time = current_time
        self.last_access_time = current_time
        self.dirty = is_write

    def touch(self, current_time, is_write):
        self.last_access_time = current_time
        if is_write:
            self.dirty = True

    def __repr__(self):
        return (f"FrameTableEntry({self.frame_number}, page={self.resident_page}, "
                f"dirty={self.dirty}, load={self.load_time}, "
                f"last={self.last_access_time})")


class PhysicalMemory:
    def __init__(self, num_frames=32):
        self.num_frames = num_frames
        self.frames = [FrameTableEntry(i) for i in range(num_frames)]

    def __iter__(self):
        return iter(self.frames)

    def find_free_frame(self):
        for frame in self.frames:
            if not frame.occupied:
                return frame
        return None

    def find_page(self, page_number):
        for frame in self.frames:
            if frame.occupied and frame.resident_page == page_number:
                return frame
        return None

    def occupied_frames(self):
        return [frame for frame in self.frames if frame.occupied]


class BackingStore:
    """Swap space; slot i holds the image of page i when it is swapped out."""

    EMPTY = None

    def __init__(self, num_slots):
        self.slots = [self.EMPTY] * num_slots

    def write(self, page_number):
        self.slots[page_number] = page_number

    def clear(self, page_number):
        self.slots[page_number] = self.EMPTY


class Statistics:
    COUNTERS = (
        'pages_referenced',
        'pages_mapped',
        'page_miss_instances',
        'frame_stolen_instances',
        'stolen_frames_written_to_swapspace',
        'stolen_frames_recovered_from_swapspace',
    )

    LABELS = {
        'pages_referenced': 'Pages referenced',
        'pages_mapped': 'Pages mapped',
        'page_miss_instances': 'Page miss instances',
        'frame_stolen_instances': 'Frame stolen instances',
        'stolen_frames_written_to_swapspace': 'Stolen frames written to swapspace',
        'stolen_frames_recovered_from_swapspace': 'Stolen frames recovered from swapspace',
    }

    def __init__(self):
        self.pages_referenced = 0
        self.pages_mapped = 0
        self.page_miss_instances = 0
        self.frame_stolen_instances = 0
        self.stolen_frames_written_to_swapspace = 0
        self.stolen_frames_recovered_from_swapspace = 0

    def record_reference(self):
        self.pages_referenced += 1
        return self.pages_referenced

    def record_page_miss(self):
        self.page_miss_instances += 1

    def record_frame_stolen(self, is_dirty=False):
        self.frame_stolen_instances += 1
        if is_dirty:
            self.stolen_frames_written_to_swapspace += 1

    def record_swap_recovery(self):
        self.stolen_frames_recovered_from_swapspace += 1

    def snapshot(self):
        return {name: getattr(self, name) for name in self.COUNTERS}

    def __str__(self):
        return "\n".join(f"{self.LABELS[name]}: {getattr(self, name)}"
                         for name in self.COUNTERS)
