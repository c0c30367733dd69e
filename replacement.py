from config import Policy, parse_policy


class ReplacementPolicy:
    """
    Chooses which occupied frame to reclaim when physical memory is full.
    Victim selection only; the simulator performs the eviction itself.
    """

    policy = None
    needs_lookahead = False

    def select_victim(self, physical_memory):
        raise NotImplementedError

    @property
    def name(self):
        return self.policy.value


class FIFOPolicy(ReplacementPolicy):
    policy = Policy.FIFO

    def select_victim(self, physical_memory):
        oldest_time = float('inf')
        victim = None

        # Strict comparison keeps the lowest frame index among ties
        for frame in physical_memory.occupied_frames():
            if frame.load_time < oldest_time:
                oldest_time = frame.load_time
                victim = frame

        return victim


class LRUPolicy(ReplacementPolicy):
    policy = Policy.LRU

    def select_victim(self, physical_memory):
        lru_time = float('inf')
        victim = None

        for frame in physical_memory.occupied_frames():
            if frame.last_access_time < lru_time:
                lru_time = frame.last_access_time
                victim = frame

        return victim


class OptimalPolicy(ReplacementPolicy):
    """
    Replace the page whose next reference is farthest in the future
    (or that is never referenced again).

    The full sequence of page numbers must be loaded before the first
    eviction, and ``position`` must track the index of the instruction
    being processed.
    """

    policy = Policy.OPTIMAL
    needs_lookahead = True

    def __init__(self):
        self.future_references = None
        self.position = 0

    def load(self, page_numbers):
        self.future_references = list(page_numbers)
        self.position = 0

    def unload(self):
        self.future_references = None
        self.position = 0

    def next_use(self, page_number):
        for idx in range(self.position + 1, len(self.future_references)):
            if self.future_references[idx] == page_number:
                return idx
        return None

    def select_victim(self, physical_memory):
        if self.future_references is None:
            raise ValueError("OPTIMAL algorithm requires the full trace; use run_batch")

        farthest_use = -1
        victim = None

        for frame in physical_memory.occupied_frames():
            next_ref_time = self.next_use(frame.resident_page)

            # Never used again - this is optimal to replace
            if next_ref_time is None:
                return frame

            if next_ref_time > farthest_use:
                farthest_use = next_ref_time
                victim = frame

        return victim


POLICIES = {
    Policy.FIFO: FIFOPolicy,
    Policy.LRU: LRUPolicy,
    Policy.OPTIMAL: OptimalPolicy,
}


def make_policy(policy):
    return POLICIES[parse_policy(policy)]()
