"""Export plan workflow."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..services.plan_exporter import PlanExporter


@dataclass
class ExportPlanWorkflow:
    exporter: PlanExporter
    name: str = "export_plan"

    def run(self, context: dict) -> dict:
        """Export plan text to PDF.

        Args:
            context (dict): `plan` text and an optional `destination` path. Without
                a destination the PDF bytes are returned instead of written.

        Returns:
            dict: `path` of the written file, or `content` bytes and `filename`.

        Raises:
            ValueError: If no plan text is provided.
            ExportFailed: If the document cannot be produced.
        """

        plan = context.get("plan")
        if not plan:
            raise ValueError("Context missing 'plan'.")
        destination = context.get("destination")
        if destination is None:
            return {
                "content": self.exporter.export_bytes(plan),
                "filename": self.exporter.default_filename,
            }
        return {"path": self.exporter.export(plan, Path(destination))}
