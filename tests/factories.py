"""Builders for analysis records and prompt doubles used across tests."""

from core.models import STATUS_ERROR, STATUS_NOT_LATEST, STATUS_OK, AnalysisError, DependencyAnalysis


def not_latest(current, latest, diff, latest_range=None):
    return DependencyAnalysis(
        status=STATUS_NOT_LATEST,
        current=current,
        latest=latest,
        latest_range=latest_range or f"^{latest}",
        diff=diff,
    )


def up_to_date(version):
    return DependencyAnalysis(status=STATUS_OK, current=version, latest=version, latest_range=f"^{version}")


def failed(message, detail=None):
    return DependencyAnalysis(status=STATUS_ERROR, error=AnalysisError(message=message, detail=detail))


class ScriptedPrompter:
    """Prompter double that records the prompt and answers with a fixed pick."""

    def __init__(self, pick=None, cancel=None):
        self.pick = pick or (lambda choices: [])
        self.cancel = cancel
        self.calls = []

    def select(self, message, choices, page_size):
        self.calls.append({"message": message, "choices": choices, "page_size": page_size})
        if self.cancel is not None:
            raise self.cancel
        return self.pick(choices)
