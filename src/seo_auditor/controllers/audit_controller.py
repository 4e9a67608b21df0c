import logging
from typing import Callable, Iterable, List, Optional

from ..config import AuditConfig
from ..engine import PageEvaluator
from ..model import Page
from ..report import AuditReport
from .report_controller import ReportSink

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int], None]


class AuditController:
    """
    Orchestrates one audit batch: evaluates every page, collects the warnings
    in an AuditReport and hands a non-empty report to the sink.

    The controller keeps one long-lived report and resets it at the start of
    every batch, so nothing leaks from one build into the next. Callers get a
    snapshot, which later batches leave alone.
    """

    def __init__(
            self,
            config: AuditConfig,
            sink: Optional[ReportSink] = None,
            evaluator: Optional[PageEvaluator] = None
    ):
        self.config = config
        self.sink = sink or ReportSink.from_config(config)
        self.evaluator = evaluator or PageEvaluator(config)
        self.report = AuditReport()

    def select_pages(self, pages: Iterable[Page]) -> List[Page]:
        """
        Keeps pages rendered from one of the configured source extensions.
        Pages that carry no source extension are kept.
        """
        extensions = set(self.config.extensions)
        return [p for p in pages if p.src_ext is None or p.src_ext in extensions]

    def run_batch(
            self,
            pages: Iterable[Page],
            progress_callback: Optional[ProgressCallback] = None
    ) -> AuditReport:
        """
        Runs the audit over `pages` and emits the report if anything was found.

        Returns:
            AuditReport: Snapshot of the batch's report (empty when all pages passed).
        """
        self.report.reset()
        pages = list(pages)
        total = len(pages)
        ignored = set(self.config.ignore)

        logger.info("SEO: Running SEO checks ...")
        for i, page in enumerate(pages):
            if page.url in ignored:
                logger.info(f"SEO: Skipping {page.url} per config.")
            else:
                logger.info(f"SEO: Processing {page.url} ...")
                self.report.record(page.url, self.evaluator.evaluate(page))

            if progress_callback:
                progress_callback(i + 1, total)

        result = self.report.snapshot()
        if result.is_empty():
            logger.info("SEO: No warnings to report! Good job!")
        else:
            logger.debug(f"SEO: {len(result)} page(s) with warnings")
            self.sink.emit(result)

        return result
