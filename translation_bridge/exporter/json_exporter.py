"""JSON exporter."""
import json
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Union


class JsonExporter:
    """Export batch translation results to JSON."""

    def export(
        self,
        output_file: Union[str, Path],
        results: Dict[Any, Dict[str, Any]],
        source_framework: str,
        target_framework: str,
    ) -> Path:
        """Export a batch report to a JSON file."""
        output_file = Path(output_file)
        output_file.parent.mkdir(parents=True, exist_ok=True)

        succeeded = sum(1 for result in results.values() if result.get("success"))
        components = sum(result.get("stats", {}).get("total_components", 0) for result in results.values())

        data = {
            "metadata": {
                "created_at": datetime.now().isoformat(),
                "source_framework": source_framework,
                "target_framework": target_framework,
                "total_items": len(results),
                "successful_items": succeeded,
                "failed_items": len(results) - succeeded,
                "total_components": components,
            },
            "results": {str(key): result for key, result in results.items()},
        }

        with open(output_file, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, default=str)

        return output_file
