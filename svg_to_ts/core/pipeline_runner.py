"""Runner executing one conversion per resolved configuration."""

import asyncio
import logging
from collections.abc import Callable, Sequence

from svg_to_ts.models.options import ConversionOptions

from .orchestrator import ConversionOrchestrator
from .state import ConversionResult

logger = logging.getLogger(__name__)


class PipelineRunner:
    """
    Coordinates the execution of several conversions in sequence.

    Every configuration gets a fresh orchestrator from the factory matching
    its conversion mode, and a run only starts once the previous one has
    finished. The first failure stops the runner; later configurations are
    not attempted.
    """

    def __init__(
        self,
        orchestrator_factory: Callable[[], ConversionOrchestrator],
        single_file_factory: Callable[[], ConversionOrchestrator] | None = None,
    ):
        """
        Initialize the pipeline runner.

        Args:
            orchestrator_factory: Builds the orchestrator of a run with
                ``optimize_for_lazy_loading`` set (one module per icon)
            single_file_factory: Builds the converter of a run without lazy
                loading (every icon in one module)
        """
        self._logger = logger.getChild(self.__class__.__name__)
        self._orchestrator_factory = orchestrator_factory
        self._single_file_factory = single_file_factory

    def execute(self, options_list: Sequence[ConversionOptions]) -> list[ConversionResult]:
        """
        Run every conversion in order.

        Args:
            options_list: One entry per conversion

        Returns:
            The results, in the order of ``options_list``

        Raises:
            ValueError: If no configuration is given, or a single-file
                conversion is requested without a single-file factory
            ConversionError: As raised by the failing conversion
        """
        if not options_list:
            raise ValueError("No conversion configured")

        return asyncio.run(self._execute(options_list))

    async def _execute(
        self, options_list: Sequence[ConversionOptions]
    ) -> list[ConversionResult]:
        results = []
        for i, options in enumerate(options_list):
            mode = "multiple files" if options.optimize_for_lazy_loading else "single file"
            self._logger.info(
                f"Running conversion {i + 1}/{len(options_list)} ({mode}): "
                f"{options.output_directory}"
            )
            orchestrator = self._factory_for(options)()
            results.append(await orchestrator.convert(options))
        return results

    def _factory_for(
        self, options: ConversionOptions
    ) -> Callable[[], ConversionOrchestrator]:
        if options.optimize_for_lazy_loading:
            return self._orchestrator_factory
        if self._single_file_factory is None:
            raise ValueError("No single-file converter configured")
        return self._single_file_factory
