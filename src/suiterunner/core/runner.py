"""Suite run orchestration."""

import logging
from typing import Any, Optional

from suiterunner.config import RunnerConfig
from suiterunner.core.discovery import discover
from suiterunner.core.executor import DirectInvoker, Invoker
from suiterunner.core.metadata import ClassMetadataSource, MetadataSource
from suiterunner.core.models import ExecutionPlan, MethodDescriptor, PlannedTest, RunOutcome
from suiterunner.core.planning import build_plan
from suiterunner.errors import InstantiationError, InvocationError

logger = logging.getLogger(__name__)


class SuiteRunner:
    """Runs the annotated methods of one test unit.

    A run goes through discovery, validation, ordering and execution. Any
    error stops the run at the point it occurs and propagates to the caller.
    """

    def __init__(
        self,
        unit: type,
        config: Optional[RunnerConfig] = None,
        invoker: Optional[Invoker] = None,
        metadata: Optional[MetadataSource] = None,
    ):
        """Initialize the runner.

        Args:
            unit: The test class to run
            config: Runner options (defaults apply when omitted)
            invoker: Call boundary used for every hook and test
            metadata: Source of the unit's method descriptors
        """
        self.unit = unit
        self.config = config or RunnerConfig()
        self.invoker = invoker or DirectInvoker()
        self.metadata = metadata or ClassMetadataSource()

    @property
    def unit_name(self) -> str:
        return getattr(self.unit, "__qualname__", repr(self.unit))

    def plan(self) -> ExecutionPlan:
        """Discover, validate and order the unit's methods without running them."""
        methods = self.metadata.describe(self.unit)
        groups = discover(methods)
        return build_plan(
            self.unit_name,
            groups,
            default_priority=self.config.default_priority,
            trim_csv_tokens=self.config.trim_csv_tokens,
        )

    def run(self) -> RunOutcome:
        """Execute the unit.

        Returns:
            RunOutcome listing every invoked method in order

        Raises:
            ConfigurationError: If validation fails; nothing is invoked
            InstantiationError: If the unit cannot be constructed
            InvocationError: If a hook or test raises
        """
        plan = self.plan()
        instance = self._instantiate()
        outcome = RunOutcome(unit_name=self.unit_name)

        if plan.before_suite is not None:
            self._invoke(plan.before_suite, self.unit, (), outcome)

        try:
            for planned in plan.tests:
                for hook in plan.before_test:
                    self._invoke(hook, instance, (), outcome)
                self._invoke_test(planned, instance, outcome)
                outcome.tests_run.append(planned.name)
                for hook in plan.after_test:
                    self._invoke(hook, instance, (), outcome)
        except InvocationError:
            if self.config.teardown_on_failure and plan.after_suite is not None:
                self._teardown_after_failure(plan.after_suite, outcome)
            raise

        if plan.after_suite is not None:
            self._invoke(plan.after_suite, self.unit, (), outcome)

        logger.info("Finished %s: %d tests run", self.unit_name, len(outcome.tests_run))
        return outcome

    def _instantiate(self) -> Any:
        try:
            return self.unit()
        except Exception as e:
            logger.error("Cannot instantiate %s: %s", self.unit_name, e)
            raise InstantiationError(self.unit_name, e) from e

    def _invoke_test(self, planned: PlannedTest, instance: Any, outcome: RunOutcome) -> None:
        method = planned.method
        if not planned.parameterized and method.param_count:
            raise InvocationError(
                method.name,
                f"declares {method.param_count} parameters but has no CsvSource",
            )
        self._invoke(method, instance, planned.args, outcome)

    def _invoke(
        self,
        method: MethodDescriptor,
        receiver: Any,
        args: tuple,
        outcome: RunOutcome,
    ) -> None:
        logger.info("Invoking %s.%s%s", self.unit_name, method.name, args or "")
        try:
            self.invoker.invoke(method, receiver, args)
        except Exception as e:
            logger.error("%s.%s raised %s: %s", self.unit_name, method.name, type(e).__name__, e)
            raise InvocationError(method.name, f"{type(e).__name__}: {e}") from e
        outcome.invoked.append(method.name)

    def _teardown_after_failure(self, method: MethodDescriptor, outcome: RunOutcome) -> None:
        try:
            self._invoke(method, self.unit, (), outcome)
        except InvocationError as e:
            # The original failure is the one reported.
            logger.error("Suite teardown after failure also failed: %s", e)


def run_tests(
    unit: type,
    config: Optional[RunnerConfig] = None,
    invoker: Optional[Invoker] = None,
    metadata: Optional[MetadataSource] = None,
) -> RunOutcome:
    """Run every annotated method of ``unit``. See ``SuiteRunner.run``."""
    return SuiteRunner(unit, config=config, invoker=invoker, metadata=metadata).run()
