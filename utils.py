# utils.py

from typing import Dict, List, Optional

from engine import ReplacementPolicy, Step


def get_color(page, use_bit=None):
    """Return a fill color for a cache slot."""
    if page is None:
        return "lightgray"
    if use_bit is None:
        return "lightblue"  # LRU/MRU slots carry no use bit
    return "lightgreen" if use_bit == 1 else "lightcoral"


def describe_cache(algorithm: str) -> str:
    """Legend shown above the cache chart for each algorithm."""
    if algorithm == ReplacementPolicy.CLOCK:
        return "Pointer indicates the *next* frame to consider for replacement. R is the Reference Bit."
    if algorithm == ReplacementPolicy.LRU:
        return ("Frames ordered by use: Leftmost (Index 0) is Least Recently Used (LRU), "
                "Rightmost is Most Recently Used (MRU).")
    if algorithm == ReplacementPolicy.MRU:
        return ("Frames ordered by use: Leftmost (Index 0) is Least Recently Used, "
                "Rightmost is Most Recently Used (MRU - replacement target).")
    return ""


def _empty_slot(index: int, order_index: Optional[int] = None) -> Dict:
    return {
        "id": f"empty-{index}",
        "page": None,
        "use_bit": None,
        "is_pointer": False,
        "order_index": order_index,
    }


def build_display_cache(step: Optional[Step], algorithm: str, cache_size: int) -> List[Dict]:
    """
    Turn a step's cache state into a fixed list of slots for rendering.

    Clock slots follow frame numbers and mark the pointer. LRU/MRU slots
    follow recency order (0 = LRU end) and are padded with empty slots so
    the chart always shows `cache_size` entries.
    """
    if step is None:
        return [_empty_slot(i) for i in range(cache_size)]

    if algorithm == ReplacementPolicy.CLOCK:
        return [
            {
                "id": f"frame-{i}",
                "page": frame.page,
                "use_bit": frame.use_bit,
                "is_pointer": i == step.pointer,
                "order_index": None,
            }
            for i, frame in enumerate(step.cache_state_after)
        ]

    if algorithm in (ReplacementPolicy.LRU, ReplacementPolicy.MRU):
        slots = [
            {
                "id": f"page-{page}-{i}",
                "page": page,
                "use_bit": None,
                "is_pointer": False,
                "order_index": i,
            }
            for i, page in enumerate(step.cache_state_after)
        ]
        while len(slots) < cache_size:
            slots.append(_empty_slot(len(slots), order_index=len(slots)))
        return slots

    return []


# -----------------------------
# Step navigation
# -----------------------------
def next_step_index(current: int, total: int) -> int:
    return max(0, min(current + 1, total - 1))


def prev_step_index(current: int) -> int:
    return max(current - 1, 0)
