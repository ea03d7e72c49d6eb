import abc
import json
import os
import re
import time

from packages.fri_core.logging import get_logger
from packages.fri_report.dto import InterviewReport

logger = get_logger("fri.report.sinks")


class ReportExporter(abc.ABC):
    """
    Receives a finished report.
    """
    @abc.abstractmethod
    def export(self, report: InterviewReport) -> str:
        """
        Export the report and return a reference to the exported artifact.
        """
        pass


class JsonFileReportExporter(ReportExporter):
    """
    Writes each report as an indented JSON file.
    File name: interview-report-{candidate-slug}-{epoch-ms}.json
    """
    def __init__(self, base_dir: str = "data/reports"):
        self.base_dir = base_dir

    def _ensure_dir(self):
        if not os.path.exists(self.base_dir):
            os.makedirs(self.base_dir, exist_ok=True)

    @staticmethod
    def _slug(name: str) -> str:
        # File name component only: lowercase ascii letters, digits and dashes
        slug = re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-")
        return slug or "candidate"

    def _generate_filename(self, report: InterviewReport) -> str:
        return f"interview-report-{self._slug(report.candidate.name)}-{int(time.time() * 1000)}.json"

    def export(self, report: InterviewReport) -> str:
        self._ensure_dir()
        file_path = os.path.join(self.base_dir, self._generate_filename(report))
        try:
            with open(file_path, "w", encoding="utf-8") as f:
                json.dump(report.to_document(), f, indent=2, ensure_ascii=False)
        except OSError as e:
            logger.error(f"Failed to write report to {file_path}: {e}")
            raise
        logger.info(f"Report for {report.candidate.name} exported to {file_path}")
        return file_path


class ContactSink(abc.ABC):
    """
    Receives the raw phone number of a candidate to contact.
    """
    @abc.abstractmethod
    def contact(self, phone: str) -> str:
        pass


class TelLinkContactSink(ContactSink):
    """
    Produces a tel: link for the dialer; the call itself is placed elsewhere.
    """
    def contact(self, phone: str) -> str:
        number = re.sub(r"[^\d+]", "", phone)
        link = f"tel:{number}"
        logger.info(f"Contact link issued: {link}")
        return link
