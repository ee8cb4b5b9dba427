"""Change status color map."""

from manifest_labeler.models.diff import ChangeStatus

CHANGE_COLORS: dict[ChangeStatus, str] = {
    ChangeStatus.UNCHANGED: "dim",
    ChangeStatus.LABELED: "green",
}


def styled_change(status: ChangeStatus) -> str:
    color = CHANGE_COLORS.get(status, "white")
    return f"[{color}]{status.value}[/{color}]"
