# engine.py

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple, Union

from validation import UnknownAlgorithm, parse_pages, validate


class ReplacementPolicy:
    """
    Enumeration of available cache replacement algorithms.

    CLOCK: Second chance - a circular pointer skips frames whose use bit is set
    LRU:   Least Recently Used - evicts the front of the recency list
    MRU:   Most Recently Used - evicts the back of the recency list
    """
    CLOCK = "Clock"
    LRU = "LRU"
    MRU = "MRU"

    ALL = (CLOCK, LRU, MRU)


# =============================================================================
# STEP TRACE - Data Model
# =============================================================================

@dataclass(frozen=True)
class Frame:
    """
    One fixed slot of a Clock cache.

    Attributes:
        page (Optional[str]): Page stored in the slot, None if empty
        use_bit (int): 1 grants the page a second chance against eviction
    """
    page: Optional[str] = None
    use_bit: int = 0


CacheState = Union[Tuple[Frame, ...], Tuple[str, ...]]


@dataclass(frozen=True)
class Step:
    """
    Immutable snapshot of one processed request (or of the empty cache).

    For Clock, the cache states are tuples of Frame indexed by frame number
    and `pointer` is the next frame to examine. For LRU/MRU, the cache states
    are tuples of page ids ordered from least to most recently used and
    `pointer` is None.

    Attributes:
        page_requested (Optional[str]): Requested page, None for the initial step
        cache_state_before (CacheState): Cache before the request
        cache_state_after (CacheState): Cache after the request
        pointer (Optional[int]): Clock pointer after the request
        hit (bool): Page was already cached
        miss (bool): Page had to be loaded
        replaced_page (Optional[str]): Evicted page, None on hit or free slot
        cumulative_hits (int): Hits up to and including this step
        cumulative_misses (int): Misses up to and including this step
        action_description (str): Human readable account of the step
    """
    page_requested: Optional[str]
    cache_state_before: CacheState
    cache_state_after: CacheState
    pointer: Optional[int]
    hit: bool
    miss: bool
    replaced_page: Optional[str]
    cumulative_hits: int
    cumulative_misses: int
    action_description: str


def _initial_step(cache: CacheState, pointer: Optional[int]) -> Step:
    return Step(
        page_requested=None,
        cache_state_before=cache,
        cache_state_after=cache,
        pointer=pointer,
        hit=False,
        miss=False,
        replaced_page=None,
        cumulative_hits=0,
        cumulative_misses=0,
        action_description="Initial state",
    )


# =============================================================================
# REPLACEMENT STRATEGIES
# =============================================================================

def simulate_clock(pages: Sequence[str], cache_size: int) -> List[Step]:
    """
    Run the Clock (second chance) algorithm over `pages`.

    On a miss the pointer sweeps the frames circularly: an empty frame or a
    frame with use bit 0 receives the page, a frame with use bit 1 has the
    bit cleared and is skipped. After one full sweep every bit is 0, so a
    victim is always found within 2 * cache_size examinations.

    Args:
        pages (Sequence[str]): Page requests in order
        cache_size (int): Number of frames

    Returns:
        List[Step]: Initial step followed by one step per request
    """
    frames: List[Frame] = [Frame() for _ in range(cache_size)]
    pointer = 0
    hits = 0
    misses = 0

    steps = [_initial_step(tuple(frames), pointer)]

    for page in pages:
        before = tuple(frames)
        replaced_page = None
        hit_index = next((i for i, f in enumerate(frames) if f.page == page), None)

        # ----- HIT -----
        if hit_index is not None:
            hits += 1
            frames[hit_index] = Frame(page, 1)
            action = f'Page "{page}" found (Hit). Set Use Bit to 1.'

        # ----- MISS -----
        else:
            misses += 1
            action = f'Page "{page}" not found (Miss). '
            while True:
                current = frames[pointer]
                if current.page is None:
                    frames[pointer] = Frame(page, 1)
                    action += f"Placed in empty frame {pointer}."
                    pointer = (pointer + 1) % cache_size
                    break
                if current.use_bit == 0:
                    replaced_page = current.page
                    frames[pointer] = Frame(page, 1)
                    action += f'Replaced page "{replaced_page}" (Use Bit 0) at frame {pointer}.'
                    pointer = (pointer + 1) % cache_size
                    break
                # Second chance
                frames[pointer] = Frame(current.page, 0)
                action += f'Checked frame {pointer} (Page "{current.page}", Use Bit 1 -> 0). '
                pointer = (pointer + 1) % cache_size

        steps.append(Step(
            page_requested=page,
            cache_state_before=before,
            cache_state_after=tuple(frames),
            pointer=pointer,
            hit=hit_index is not None,
            miss=hit_index is None,
            replaced_page=replaced_page,
            cumulative_hits=hits,
            cumulative_misses=misses,
            action_description=action,
        ))

    return steps


def _simulate_recency(pages: Sequence[str], cache_size: int, evict_mru: bool) -> List[Step]:
    """Shared LRU/MRU loop; only the victim end of the list differs."""
    cache: List[str] = []   # index 0 = LRU end, last = MRU end
    hits = 0
    misses = 0

    steps = [_initial_step((), None)]

    for page in pages:
        before = tuple(cache)
        replaced_page = None
        hit = page in cache

        if hit:
            hits += 1
            cache.remove(page)
            cache.append(page)
            action = f'Page "{page}" found (Hit). Moved to MRU position.'
        else:
            misses += 1
            action = f'Page "{page}" not found (Miss). '
            if len(cache) < cache_size:
                cache.append(page)
                action += "Added to cache."
            elif evict_mru:
                replaced_page = cache.pop()
                cache.append(page)
                action += f'Cache full. Replaced MRU page "{replaced_page}".'
            else:
                replaced_page = cache.pop(0)
                cache.append(page)
                action += f'Cache full. Replaced LRU page "{replaced_page}".'

        steps.append(Step(
            page_requested=page,
            cache_state_before=before,
            cache_state_after=tuple(cache),
            pointer=None,
            hit=hit,
            miss=not hit,
            replaced_page=replaced_page,
            cumulative_hits=hits,
            cumulative_misses=misses,
            action_description=action,
        ))

    return steps


def simulate_lru(pages: Sequence[str], cache_size: int) -> List[Step]:
    """Run LRU over `pages`: a miss on a full cache evicts the front of the list."""
    return _simulate_recency(pages, cache_size, evict_mru=False)


def simulate_mru(pages: Sequence[str], cache_size: int) -> List[Step]:
    """Run MRU over `pages`: a miss on a full cache evicts the back of the list."""
    return _simulate_recency(pages, cache_size, evict_mru=True)


# -----------------------------
# Dispatcher
# -----------------------------
def simulate(algorithm: str, pages: Sequence[str], cache_size: int) -> List[Step]:
    """
    Run exactly one replacement strategy and return its full trace.

    Raises:
        UnknownAlgorithm: If `algorithm` is not one of ReplacementPolicy.ALL
    """
    if algorithm == ReplacementPolicy.CLOCK:
        return simulate_clock(pages, cache_size)
    elif algorithm == ReplacementPolicy.LRU:
        return simulate_lru(pages, cache_size)
    elif algorithm == ReplacementPolicy.MRU:
        return simulate_mru(pages, cache_size)
    raise UnknownAlgorithm(algorithm)


def run_simulation(algorithm: str, cache_size: int, raw_sequence: str) -> List[Step]:
    """
    Parse, validate and simulate in one call.

    Validation happens before any simulation work, so on error no partial
    trace exists; the ValidationError or UnknownAlgorithm propagates as is.
    """
    pages = parse_pages(raw_sequence)
    pages, cache_size = validate(cache_size, raw_sequence, pages)
    return simulate(algorithm, pages, cache_size)


# -----------------------------
# Statistics
# -----------------------------
def get_stats(step: Optional[Step]) -> Dict[str, Union[int, float]]:
    """
    Summarize the running counters of a step.

    Returns:
        Dict[str, Union[int, float]]: hits, misses, total_refs and hit_ratio
            (hits / total_refs, 0.0 before any request)
    """
    if step is None:
        hits, misses = 0, 0
    else:
        hits, misses = step.cumulative_hits, step.cumulative_misses
    total_refs = hits + misses
    hit_ratio = (hits / total_refs) if total_refs > 0 else 0.0

    return {
        "hits": hits,
        "misses": misses,
        "total_refs": total_refs,
        "hit_ratio": round(hit_ratio, 4),
    }


def format_hit_rate(step: Optional[Step]) -> str:
    """Hit rate as a percentage with one decimal, or "N/A" with no requests."""
    stats = get_stats(step)
    if stats["total_refs"] == 0:
        return "N/A"
    return f"{stats['hits'] / stats['total_refs'] * 100:.1f}%"
