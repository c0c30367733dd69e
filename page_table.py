from enum import Enum


class PageState(Enum):
    NEVER_MAPPED = 'UNUSED'
    EVICTED = 'STOLEN'
    RESIDENT = 'MAPPED'


class PageTableEntry:
    def __init__(self, page_number):
        self.page_number = page_number
        self.state = PageState.NEVER_MAPPED
        self.frame = None  # None means not in memory
        self.on_disk = False  # dirty image held in the backing store

    def is_resident(self):
        return self.state is PageState.RESIDENT

    def map_to(self, frame_number):
        self.state = PageState.RESIDENT
        self.frame = frame_number
        self.on_disk = False

    def evict(self, written_to_disk):
        self.state = PageState.EVICTED
        self.frame = None
        if written_to_disk:
            self.on_disk = True

    def __repr__(self):
        return (f"PageTableEntry({self.page_number}, {self.state.name}, "
                f"frame={self.frame}, on_disk={self.on_disk})")


class PageTable:
    def __init__(self, num_pages=128):
        self.entries = [PageTableEntry(i) for i in range(num_pages)]

    def __iter__(self):
        return iter(self.entries)

    def get_entry(self, page_number):
        return self.entries[page_number]

    def count_mapped(self):
        """Pages that have ever been touched, resident or evicted."""
        return sum(1 for entry in self.entries
                   if entry.state is not PageState.NEVER_MAPPED)
