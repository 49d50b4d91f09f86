"""Shared constants for workhere."""

from typing import List, Tuple


# Default managed directory, relative to the repository root
DEFAULT_WORKTREE_DIR: Tuple[str, str] = (".git", "worktree")

# Environment variables
ENV_WORKTREE_DIR = "WORKHERE_DIR"
ENV_LOG_LEVEL = "WORKHERE_LOG_LEVEL"

# Porcelain format prefixes
PORCELAIN_WORKTREE = "worktree "
PORCELAIN_BRANCH = "branch refs/heads/"
# Lines after a worktree line searched for its branch
BRANCH_LOOKAHEAD = 4

# Random branch name parts
FIRST_NAMES: List[str] = [
    "alice", "bob", "charlie", "david", "emma", "frank", "grace", "henry",
    "iris", "jack", "kate", "liam", "mia", "noah", "olivia", "peter",
    "quinn", "ruby", "sam", "tara", "uma", "victor", "wendy", "xavier",
    "yuki", "zoe", "alex", "ben", "claire", "dan", "eva", "finn",
    "gina", "hugo", "ivy", "jake", "kim", "leo", "maya", "nick",
    "oscar", "paul", "quin", "rose", "steve", "tom", "uri", "vera",
    "will", "xena", "yan", "zara",
]

LAST_NAMES: List[str] = [
    "smith", "jones", "brown", "davis", "miller", "wilson", "moore", "taylor",
    "anderson", "thomas", "jackson", "white", "harris", "martin", "garcia", "martinez",
    "robinson", "clark", "rodriguez", "lewis", "lee", "walker", "hall", "allen",
    "young", "king", "wright", "lopez", "hill", "scott", "green", "adams",
    "baker", "nelson", "carter", "mitchell", "perez", "roberts", "turner", "phillips",
    "campbell", "parker", "evans", "edwards", "collins", "stewart", "sanchez", "morris",
    "rogers", "reed", "cook", "morgan",
]
