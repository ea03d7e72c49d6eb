from .dto import InterviewReport, Recommendation, Summary, SummaryStatistics
from .engine import ReportGenerator, SummaryGenerator
from .sinks import ContactSink, JsonFileReportExporter, ReportExporter, TelLinkContactSink

__all__ = [
    "InterviewReport",
    "Recommendation",
    "Summary",
    "SummaryStatistics",
    "ReportGenerator",
    "SummaryGenerator",
    "ContactSink",
    "JsonFileReportExporter",
    "ReportExporter",
    "TelLinkContactSink",
]
