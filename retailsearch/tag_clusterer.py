# Tag Clusterer - merges near-duplicate tag spellings
# Offline/maintenance operation, O(n^2) in vocabulary size

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Sequence

from .string_metrics import similarity

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLD = 0.7


def pick_canonical(tags: Sequence[str]) -> str:
    """Shortest tag wins, ties broken lexicographically."""
    return min(tags, key=lambda tag: (len(tag), tag))


@dataclass
class TagCluster:
    """A group of near-duplicate tags and the tag that stands for them"""
    canonical: str
    members: List[str] = field(default_factory=list)


class TagClusterer:
    """
    Greedy single-pass tag clustering.

    Tags are visited in input order. Each tag not yet absorbed seeds a
    cluster and absorbs every later unabsorbed tag whose similarity to the
    seed is at least ``threshold``. Absorbed tags are never compared against
    later tags, so clustering is not transitive: with A~B and B~C but not
    A~C, C is left in its own cluster. Known limitation, kept so canonical
    tags stay stable across runs.
    """

    def __init__(self, threshold: float = DEFAULT_THRESHOLD,
                 metric: Callable[[str, str], float] = similarity):
        self.threshold = threshold
        self.metric = metric

    def clusters(self, tags: Sequence[str]) -> List[TagCluster]:
        absorbed = [False] * len(tags)
        result = []

        for i, seed in enumerate(tags):
            if absorbed[i]:
                continue
            absorbed[i] = True
            members = [seed]

            for j in range(i + 1, len(tags)):
                if absorbed[j]:
                    continue
                if self.metric(seed, tags[j]) >= self.threshold:
                    members.append(tags[j])
                    absorbed[j] = True

            result.append(TagCluster(canonical=pick_canonical(members), members=members))

        logger.debug("Clustered %d tags into %d clusters", len(tags), len(result))
        return result

    def cluster(self, tags: Sequence[str]) -> List[str]:
        """Canonical tag of every cluster, sorted and distinct."""
        return sorted({c.canonical for c in self.clusters(tags)})

    def canonical_map(self, tags: Sequence[str]) -> Dict[str, str]:
        """Map every input tag to the canonical tag of its cluster."""
        mapping = {}
        for c in self.clusters(tags):
            for member in c.members:
                mapping.setdefault(member, c.canonical)
        return mapping


def cluster_tags(tags: Sequence[str], threshold: float = DEFAULT_THRESHOLD) -> List[str]:
    return TagClusterer(threshold).cluster(tags)
