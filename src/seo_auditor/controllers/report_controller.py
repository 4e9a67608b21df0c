import logging

from ..config import AuditConfig, ConsoleOutput, FileOutput, HandlerOutput, OutputTarget
from ..report import AuditReport
from ..utils.json_service import to_json

logger = logging.getLogger(__name__)


class ReportSink:
    """
    Delivers a finished AuditReport to exactly one destination.

    The destination is fixed at construction: a handler function, a JSON file
    or the console. File write errors propagate to the caller.
    """

    def __init__(self, target: OutputTarget):
        if not isinstance(target, (HandlerOutput, FileOutput, ConsoleOutput)):
            raise TypeError(f"Unsupported output target: {target!r}")
        self.target = target

    @classmethod
    def from_config(cls, config: AuditConfig) -> "ReportSink":
        return cls(config.output_target)

    def emit(self, report: AuditReport) -> None:
        if isinstance(self.target, HandlerOutput):
            self.target.handler(report.as_dict())
        elif isinstance(self.target, FileOutput):
            self._write_file(report, self.target)
        else:
            self._write_console(report)

    @staticmethod
    def render(report: AuditReport) -> str:
        """The JSON document written by the file and console targets."""
        return to_json(report.as_dict())

    def _write_file(self, report: AuditReport, target: FileOutput) -> None:
        content = self.render(report)
        target.path.write_text(content, encoding="utf-8")
        logger.warning(f"SEO: Warnings were issued during this run. Report saved to {target.path}")

    def _write_console(self, report: AuditReport) -> None:
        logger.warning("SEO: Warnings were issued during this run. Report as follows:")
        print(self.render(report))
