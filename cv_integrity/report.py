from pathlib import Path
from jinja2 import Environment, FileSystemLoader

env = Environment(loader=FileSystemLoader(Path(__file__).parent / "templates"),
                  autoescape=True)

def report_to_html(report, title: str = "CV self-check") -> str:
    """Render a CheckReport → standalone HTML page."""
    return env.get_template("report.html").render(r=report, title=title)
