"""
Keysmith Report Generator
==========================

Writes :class:`shared.models.ToolResult` envelopes as JSON (stdout or
file) and as a self-contained HTML page with inline CSS.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from html import escape
from pathlib import Path
from typing import Any

from shared.models import ToolResult

_HTML_TEMPLATE = """\
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <title>Keysmith Report - {tool}</title>
    <style>
        :root {{
            --ink: #e6edf3;
            --muted: #7d8590;
            --page: #0b0f14;
            --card: #131a22;
            --rule: #2a3441;
            --key: #f0b429;
            --weak: #ef4444;
            --moderate: #f59e0b;
            --notice: #38bdf8;
            --ok: #22c55e;
        }}
        body {{
            margin: 0;
            padding: 2rem 1rem;
            background: var(--page);
            color: var(--ink);
            font: 15px/1.55 system-ui, sans-serif;
        }}
        main {{ max-width: 880px; margin: 0 auto; }}
        header {{ border-bottom: 2px solid var(--key); margin-bottom: 1.5rem; }}
        header h1 {{ color: var(--key); margin: 0 0 .25rem; }}
        .muted {{ color: var(--muted); }}
        section {{
            background: var(--card);
            border: 1px solid var(--rule);
            border-radius: 6px;
            padding: 1rem 1.25rem;
            margin-bottom: 1.25rem;
        }}
        table {{ border-collapse: collapse; width: 100%; }}
        th, td {{ border-bottom: 1px solid var(--rule); padding: .4rem .75rem; text-align: left; }}
        th {{ color: var(--key); font-weight: 600; }}
        .finding {{ border-left: 3px solid var(--rule); padding: .5rem .9rem; margin: .6rem 0; }}
        .severity-high {{ border-left-color: var(--weak); }}
        .severity-medium {{ border-left-color: var(--moderate); }}
        .severity-low {{ border-left-color: var(--notice); }}
        .severity-info {{ border-left-color: var(--ok); }}
        pre {{ background: var(--page); padding: .75rem; overflow-x: auto; font-size: 13px; }}
    </style>
</head>
<body>
    <main>
        <header>
            <h1>Keysmith :: {tool}</h1>
            <p class="muted">Generated {timestamp}</p>
        </header>

        <section>
            <h2>Summary</h2>
            <p>{summary}</p>
            <table>
                <tr><th>Command</th><td>{tool}</td><th>Subject</th><td>{target}</td></tr>
                <tr><th>Duration</th><td>{duration}</td><th>Findings</th><td>{finding_count}</td></tr>
            </table>
        </section>

        <section>
            <h2>Findings</h2>
            {findings_html}
        </section>

        <section>
            <h2>Result</h2>
            <pre>{metadata_json}</pre>
        </section>
    </main>
</body>
</html>
"""


class KeysmithReportGenerator:
    """Generates JSON and HTML reports from :class:`ToolResult` envelopes.

    Usage::

        reporter = KeysmithReportGenerator()
        reporter.generate_json(result, Path("report.json"))
        reporter.generate_html(result, Path("report.html"))
    """

    def to_dict(self, result: ToolResult) -> dict[str, Any]:
        """Build the JSON report structure."""
        return {
            "report_metadata": {
                "generated_at": datetime.now(timezone.utc).isoformat(),
                "tool": result.tool_name,
                "target": result.target,
            },
            "summary": {
                "description": result.summary,
                "total_findings": len(result.findings),
                "severity_counts": result.severity_counts,
                "duration_seconds": result.duration_seconds,
            },
            "findings": [f.model_dump(mode="json") for f in result.findings],
            "result": result.metadata,
        }

    def to_json(self, result: ToolResult) -> str:
        return json.dumps(self.to_dict(result), indent=2, ensure_ascii=False)

    def generate_json(self, result: ToolResult, output_path: Path) -> Path:
        """Write the JSON report to *output_path* and return the path."""
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.to_json(result), encoding="utf-8")
        return output_path

    def generate_html(self, result: ToolResult, output_path: Path) -> Path:
        """Write the HTML report to *output_path* and return the path."""
        duration = result.duration_seconds
        html_content = _HTML_TEMPLATE.format(
            tool=escape(result.tool_name),
            target=escape(result.target),
            timestamp=datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC"),
            summary=escape(result.summary),
            duration=f"{duration:.3f}s" if duration is not None else "n/a",
            finding_count=len(result.findings),
            findings_html=self._build_findings_html(result),
            metadata_json=escape(
                json.dumps(result.metadata, indent=2, ensure_ascii=False)
            ),
        )

        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(html_content, encoding="utf-8")
        return output_path

    @staticmethod
    def _build_findings_html(result: ToolResult) -> str:
        if not result.findings:
            return '<p class="muted">No findings.</p>'

        parts: list[str] = []
        for finding in result.findings:
            body = f"<p>{escape(finding.description)}</p>"
            if finding.recommendation:
                body += (
                    '<p class="muted">Recommendation: '
                    f"{escape(finding.recommendation)}</p>"
                )
            parts.append(
                f'<div class="finding {finding.severity.css_class}">'
                f"<h3>[{finding.severity.value}] {escape(finding.title)}</h3>"
                f"{body}</div>"
            )
        return "\n".join(parts)
