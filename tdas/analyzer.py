"""Analysis of web server logs: visitors, popular resources and DoS attackers."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from os import PathLike
from typing import Union

from tdas.abb import BinarySearchTree
from tdas.cola_prioridad import Heap, heap_from_list
from tdas.dos import DoSDetector

TIME_FORMAT = "%Y-%m-%dT%H:%M:%S%z"

_IP_FIELD = 0
_TIME_FIELD = 1
_URL_FIELD = 3

_TIMESTAMP_RE = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}[+-]\d{2}:\d{2}")


@dataclass(frozen=True)
class Resource:
    """A requested resource and how many times it was visited."""

    name: str
    visits: int


def compare_ips(ip1: str, ip2: str) -> int:
    """Compare two dotted IPv4 addresses numerically, field by field."""
    for part1, part2 in zip(ip1.split(".")[:4], ip2.split(".")[:4]):
        a, b = int(part1), int(part2)
        if a < b:
            return -1
        if a > b:
            return 1
    return 0


def _parse_time(text: str) -> datetime:
    if not _TIMESTAMP_RE.fullmatch(text):
        raise ValueError(f"invalid timestamp: {text!r}")
    return datetime.strptime(text, TIME_FORMAT)


def _by_visits(a: Resource, b: Resource) -> int:
    return a.visits - b.visits


class LogAnalyzer:
    """Accumulates log files and answers queries about them."""

    def __init__(self) -> None:
        self._visitors: BinarySearchTree[str, str] = BinarySearchTree(compare_ips)
        self._visit_counts: dict[str, int] = {}
        self._most_visited: Heap[Resource] = Heap(_by_visits)

    def add_file(self, path: Union[str, PathLike]) -> list[str]:
        """Load a log file and return the IPs flagged as DoS attackers in it.

        Each line holds whitespace-separated fields: IP, timestamp, method
        and resource. Raises OSError if the file cannot be read and
        ValueError on a malformed line.
        """
        detector = DoSDetector()
        with open(path, encoding="utf-8") as log:
            for line in log:
                self._load_line(line, detector)
        self._most_visited = heap_from_list(
            (Resource(name, visits) for name, visits in self._visit_counts.items()),
            _by_visits,
        )
        return detector.attackers()

    def _load_line(self, line: str, detector: DoSDetector) -> None:
        fields = line.split()
        if len(fields) <= _URL_FIELD:
            raise ValueError(f"malformed log line: {line.rstrip()!r}")
        url = fields[_URL_FIELD]
        ip = fields[_IP_FIELD]
        self._visit_counts[url] = self._visit_counts.get(url, 0) + 1
        self._visitors.put(ip, ip)
        detector.add_visit(ip, _parse_time(fields[_TIME_FIELD]))

    def visitors(self, ip1: str, ip2: str) -> list[str]:
        """Return the IPs seen between ip1 and ip2 inclusive, in numeric order.

        Raises LookupError when no IP falls in the range.
        """
        found = [ip for ip, _ in self._visitors._walk(ip1, ip2)]
        if not found:
            raise LookupError(f"no visitors between {ip1} and {ip2}")
        return found

    def most_visited(self, count: int) -> list[Resource]:
        """Return up to ``count`` resources, most visited first.

        Raises LookupError when there is nothing to report.
        """
        top: list[Resource] = []
        while len(top) < count and not self._most_visited.is_empty():
            top.append(self._most_visited.dequeue())
        for resource in top:
            self._most_visited.enqueue(resource)
        if not top:
            raise LookupError("no visited resources")
        return top