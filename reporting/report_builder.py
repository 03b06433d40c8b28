"""
Report Builder Module
Generates JSON and HTML reports of a minification run using Jinja2 templates.
"""

import json
from pathlib import Path
from typing import Dict, Union
import logging

from jinja2 import Environment, FileSystemLoader, select_autoescape

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / 'templates'


class ReportBuilder:
    def __init__(self, template_name: str = 'report.html.j2'):
        self.env = Environment(
            loader=FileSystemLoader(str(TEMPLATES_DIR)),
            autoescape=select_autoescape(['html', 'j2']),
        )
        self.template_name = template_name
        self.data = {}

    def collect_metrics(self, result) -> Dict:
        """Collect and organize the metrics of a MinifyResult."""
        self.data = result.to_dict()
        summary = self.data['summary']
        uses = summary['class_uses']
        saved = sum(
            (len(entry['original']) - len(entry['short'])) * entry['count']
            for entry in self.data['class_map']
        )
        summary['characters_saved'] = saved
        summary['average_saving'] = round(saved / uses, 2) if uses else 0.0
        return self.data

    def generate_html_report(self, output_path: Union[str, Path]) -> Path:
        """Render the collected metrics to an HTML report."""
        output_path = Path(output_path)
        template = self.env.get_template(self.template_name)
        output_path.write_text(template.render(**self.data), encoding='utf-8')
        logger.info(f"HTML report written to {output_path}")
        return output_path

    def generate_json_report(self, output_path: Union[str, Path]) -> Path:
        """Write the collected metrics as JSON."""
        output_path = Path(output_path)
        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(self.data, f, indent=2)
        logger.info(f"JSON report written to {output_path}")
        return output_path

    def generate_report(self, result, output_path: Union[str, Path]) -> Path:
        """Collect metrics from result and write a report; .html/.htm selects HTML, anything else JSON."""
        self.collect_metrics(result)
        if Path(output_path).suffix.lower() in ('.html', '.htm'):
            return self.generate_html_report(output_path)
        return self.generate_json_report(output_path)
