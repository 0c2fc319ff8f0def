"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every sorting algorithm the visualizer knows
about.

    from algorithms import Algorithm, REGISTRY, resolve

    stream = resolve("Quick Sort")([5, 3, 4, 1, 2])
    for event in stream: ...

`Algorithm` is a closed Enum (its values are the labels the UI shows);
REGISTRY maps every member to an AlgoInfo card.  The set is fixed, so
dispatch is a plain table lookup and an unknown identifier is a
programmer error (ValueError), not something to recover from.

Identifiers without their own stream yet are registered against the
Bubble Sort stream and flagged `placeholder=True` so the UI can say so.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, Iterable, List, Optional, Union

from algorithms.event  import EventKind, SortEvent
from algorithms.stream import SortStream, StreamContractError

# ---------------------------------------------------------------------------
# Import all stream modules
# ---------------------------------------------------------------------------
from algorithms.bubble    import BubbleSortStream,    PSEUDOCODE as _bubble_pc
from algorithms.selection import SelectionSortStream, PSEUDOCODE as _selection_pc
from algorithms.insertion import InsertionSortStream, PSEUDOCODE as _insertion_pc
from algorithms.merge     import MergeSortStream,     PSEUDOCODE as _merge_pc
from algorithms.quick     import QuickSortStream,     PSEUDOCODE as _quick_pc
from algorithms.heap      import HeapSortStream,      PSEUDOCODE as _heap_pc
from algorithms.counting  import CountingSortStream,  PSEUDOCODE as _counting_pc
from algorithms.shell     import ShellSortStream,     PSEUDOCODE as _shell_pc
from algorithms.comb      import CombSortStream,      PSEUDOCODE as _comb_pc
from algorithms.gnome     import GnomeSortStream,     PSEUDOCODE as _gnome_pc
from algorithms.odd_even  import OddEvenSortStream,   PSEUDOCODE as _odd_even_pc
from algorithms.cycle     import CycleSortStream,     PSEUDOCODE as _cycle_pc
from algorithms.pancake   import PancakeSortStream,   PSEUDOCODE as _pancake_pc


StreamFactory = Callable[[Iterable[int]], SortStream]


# ---------------------------------------------------------------------------
# Algorithm — the closed set of identifiers
# ---------------------------------------------------------------------------
class Algorithm(Enum):
    BUBBLE      = "Bubble Sort"
    SELECTION   = "Selection Sort"
    INSERTION   = "Insertion Sort"
    MERGE       = "Merge Sort"
    QUICK       = "Quick Sort"
    HEAP        = "Heap Sort"
    COUNTING    = "Counting Sort"
    RADIX       = "Radix Sort"
    BUCKET      = "Bucket Sort"
    SHELL       = "Shell Sort"
    TIM         = "Tim Sort"
    COMB        = "Comb Sort"
    PIGEONHOLE  = "Pigeonhole Sort"
    CYCLE       = "Cycle Sort"
    STRAND      = "Strand Sort"
    BITONIC     = "Bitonic Sort"
    PANCAKE     = "Pancake Sort"
    BOGO        = "Bogo Sort"
    GNOME       = "Gnome Sort"
    STOOGE      = "Stooge Sort"
    ODD_EVEN    = "Odd-Even Sort"

    @property
    def label(self) -> str:
        return self.value

    @property
    def key(self) -> str:
        """URL/JSON-friendly slug, e.g. "odd_even"."""
        return self.name.lower()

    @classmethod
    def parse(cls, value: Union["Algorithm", str]) -> "Algorithm":
        """Accept a member, its label ("Quick Sort"), its name or its key."""
        if isinstance(value, cls):
            return value
        text = str(value)
        for algo in cls:
            if text == algo.value or text.upper() == algo.name:
                return algo
        raise ValueError(f"Unknown algorithm: {value!r}")


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    algorithm:         Algorithm
    factory:           StreamFactory             # values → SortStream
    pseudocode:        List[str]                 # lines for the side-panel
    complexity_time:   str       = ""            # e.g. "O(n²)"
    complexity_space:  str       = ""            # e.g. "O(1)"
    description:       str       = ""            # one-liner for the UI card
    placeholder:       bool      = False         # borrowing another stream?
    tags:              List[str] = field(default_factory=list)

    @property
    def key(self) -> str:
        return self.algorithm.key

    @property
    def label(self) -> str:
        return self.algorithm.label

    def to_dict(self) -> Dict[str, object]:
        return {
            "key":              self.key,
            "label":            self.label,
            "complexity_time":  self.complexity_time,
            "complexity_space": self.complexity_space,
            "description":      self.description,
            "placeholder":      self.placeholder,
            "tags":             list(self.tags),
        }


def _placeholder(algorithm: Algorithm, complexity_time: str) -> AlgoInfo:
    return AlgoInfo(
        algorithm=algorithm, factory=BubbleSortStream, pseudocode=_bubble_pc,
        complexity_time=complexity_time,
        description="Not implemented yet — animates Bubble Sort instead.",
        placeholder=True,
    )


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[Algorithm, AlgoInfo] = {

    Algorithm.BUBBLE: AlgoInfo(
        algorithm=Algorithm.BUBBLE, factory=BubbleSortStream, pseudocode=_bubble_pc,
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Repeatedly swaps adjacent out-of-order pairs.",
        tags=["comparison", "stable", "in-place"],
    ),

    Algorithm.SELECTION: AlgoInfo(
        algorithm=Algorithm.SELECTION, factory=SelectionSortStream, pseudocode=_selection_pc,
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Selects the minimum of the unsorted tail, one swap per pass.",
        tags=["comparison", "in-place"],
    ),

    Algorithm.INSERTION: AlgoInfo(
        algorithm=Algorithm.INSERTION, factory=InsertionSortStream, pseudocode=_insertion_pc,
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Shifts each element left into the sorted prefix.",
        tags=["comparison", "stable", "in-place"],
    ),

    Algorithm.MERGE: AlgoInfo(
        algorithm=Algorithm.MERGE, factory=MergeSortStream, pseudocode=_merge_pc,
        complexity_time="O(n log n)", complexity_space="O(n)",
        description="Splits in halves, then merges sorted runs.",
        tags=["comparison", "stable", "divide-and-conquer"],
    ),

    Algorithm.QUICK: AlgoInfo(
        algorithm=Algorithm.QUICK, factory=QuickSortStream, pseudocode=_quick_pc,
        complexity_time="O(n log n) avg, O(n²) worst", complexity_space="O(log n)",
        description="Lomuto partition around the last element.",
        tags=["comparison", "in-place", "divide-and-conquer"],
    ),

    Algorithm.HEAP: AlgoInfo(
        algorithm=Algorithm.HEAP, factory=HeapSortStream, pseudocode=_heap_pc,
        complexity_time="O(n log n)", complexity_space="O(1)",
        description="Builds a max-heap, then pops the max to the end.",
        tags=["comparison", "in-place"],
    ),

    Algorithm.COUNTING: AlgoInfo(
        algorithm=Algorithm.COUNTING, factory=CountingSortStream, pseudocode=_counting_pc,
        complexity_time="O(n + k)", complexity_space="O(n + k)",
        description="Tallies each value, then writes values back in order. No comparisons.",
        tags=["non-comparison", "stable"],
    ),

    Algorithm.RADIX: _placeholder(Algorithm.RADIX, "O(d · (n + b))"),
    Algorithm.BUCKET: _placeholder(Algorithm.BUCKET, "O(n + k) avg"),

    Algorithm.SHELL: AlgoInfo(
        algorithm=Algorithm.SHELL, factory=ShellSortStream, pseudocode=_shell_pc,
        complexity_time="O(n²) worst (Shell gaps)", complexity_space="O(1)",
        description="Insertion sort over halving gaps.",
        tags=["comparison", "in-place"],
    ),

    Algorithm.TIM: _placeholder(Algorithm.TIM, "O(n log n)"),

    Algorithm.COMB: AlgoInfo(
        algorithm=Algorithm.COMB, factory=CombSortStream, pseudocode=_comb_pc,
        complexity_time="O(n²) worst", complexity_space="O(1)",
        description="Bubble sort with a gap shrinking by 1.3 each pass.",
        tags=["comparison", "in-place"],
    ),

    Algorithm.PIGEONHOLE: _placeholder(Algorithm.PIGEONHOLE, "O(n + k)"),

    Algorithm.CYCLE: AlgoInfo(
        algorithm=Algorithm.CYCLE, factory=CycleSortStream, pseudocode=_cycle_pc,
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Rotates each permutation cycle into place with minimal writes.",
        tags=["comparison", "in-place"],
    ),

    Algorithm.STRAND: _placeholder(Algorithm.STRAND, "O(n²)"),
    Algorithm.BITONIC: _placeholder(Algorithm.BITONIC, "O(n log² n)"),

    Algorithm.PANCAKE: AlgoInfo(
        algorithm=Algorithm.PANCAKE, factory=PancakeSortStream, pseudocode=_pancake_pc,
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Sorts using only prefix reversals.",
        tags=["comparison", "in-place"],
    ),

    Algorithm.BOGO: _placeholder(Algorithm.BOGO, "O(n · n!) expected"),

    Algorithm.GNOME: AlgoInfo(
        algorithm=Algorithm.GNOME, factory=GnomeSortStream, pseudocode=_gnome_pc,
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Walks forward, stepping back after every swap.",
        tags=["comparison", "stable", "in-place"],
    ),

    Algorithm.STOOGE: _placeholder(Algorithm.STOOGE, "O(n^2.71)"),

    Algorithm.ODD_EVEN: AlgoInfo(
        algorithm=Algorithm.ODD_EVEN, factory=OddEvenSortStream, pseudocode=_odd_even_pc,
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Alternates odd and even neighbour passes.",
        tags=["comparison", "stable", "in-place"],
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def resolve(identifier: Union[Algorithm, str]) -> StreamFactory:
    """Return the stream constructor for `identifier`; ValueError if unknown."""
    return REGISTRY[Algorithm.parse(identifier)].factory


def get_algorithm(identifier: Union[Algorithm, str]) -> Optional[AlgoInfo]:
    """Return AlgoInfo by member / label / key, or None."""
    try:
        return REGISTRY[Algorithm.parse(identifier)]
    except ValueError:
        return None


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in declaration order."""
    return [REGISTRY[a] for a in Algorithm]


def algorithms_by_tag(tag: str) -> List[AlgoInfo]:
    """Filter registry by tag."""
    return [a for a in list_algorithms() if tag in a.tags]


__all__ = [
    "Algorithm",
    "AlgoInfo",
    "EventKind",
    "REGISTRY",
    "SortEvent",
    "SortStream",
    "StreamContractError",
    "StreamFactory",
    "algorithms_by_tag",
    "get_algorithm",
    "list_algorithms",
    "resolve",
]
