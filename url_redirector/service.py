import logging
from typing import Iterable, Iterator, Optional

from url_redirector.rules.matcher import RuleSet, rules_version
from url_redirector.rules.models import MatchResult, Redirect
from url_redirector.rules.repository import RulesRepository

logger = logging.getLogger(__name__)


class RedirectService:
    """Evaluates URLs against the stored rules.

    The compiled :class:`RuleSet` is rebuilt whenever the stored list
    changes, and each evaluation runs against one complete snapshot.
    """

    def __init__(self, repository: RulesRepository) -> None:
        self._repository = repository
        self._stamp: Optional[tuple[int, int]] = None
        self._rule_set: Optional[RuleSet] = None

    @property
    def rule_set(self) -> RuleSet:
        return self.refresh()

    def refresh(self) -> RuleSet:
        stamp = self._repository.stamp()
        if self._rule_set is not None and stamp == self._stamp:
            return self._rule_set

        rules = self._repository.list_rules()
        version = rules_version(rules)
        if self._rule_set is None or self._rule_set.version != version:
            self._rule_set = RuleSet.build(rules)
            logger.info("Redirect rules updated: %d rules (version %s)", len(rules), version[:12])
        self._stamp = stamp
        return self._rule_set

    def evaluate(self, url: str) -> MatchResult:
        result = self.refresh().match(url)
        if isinstance(result, Redirect):
            logger.info("Redirecting from %s to %s", url, result.destination)
        else:
            logger.debug("No rule matched %s", url)
        return result

    def rewrite(self, url: str) -> str:
        result = self.evaluate(url)
        return result.destination if isinstance(result, Redirect) else url

    def rewrite_many(self, urls: Iterable[str]) -> Iterator[tuple[str, MatchResult]]:
        for url in urls:
            yield url, self.evaluate(url)
