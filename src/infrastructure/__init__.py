from .credential import LeetCodeCredential
from .http_client import AsyncHTTPClient
from .leetcode_client import LeetCodeApiClient
from .progress import NullProgress, TqdmProgress
from .solution_locator import SolutionLocator, matches_solution_directory

__all__ = [
    "AsyncHTTPClient",
    "LeetCodeApiClient",
    "LeetCodeCredential",
    "NullProgress",
    "SolutionLocator",
    "TqdmProgress",
    "matches_solution_directory",
]
