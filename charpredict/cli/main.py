import typer
import requests
import os

from charpredict.analytics.markov import current_state_of
from charpredict.config import settings
from charpredict.logger import set_level
from charpredict.services import PredictorSession, build_graph, build_view

app = typer.Typer(help="Next-character prediction from a static character-class Markov model.")
BASE = os.getenv("API_BASE", "http://127.0.0.1:8000")
API_KEY = os.getenv("API_KEY")
BAR_WIDTH = 30


@app.callback()
def main(log_level: str = typer.Option(settings.cli_log_level, "--log-level", help="Log level for this run.")):
    # keep INFO start-up records out of the way of the rendered output
    set_level(log_level)


def _headers():
    h = {}
    if API_KEY:
        h["X-API-Key"] = API_KEY
    return h


def _bar(p: float, width: int = BAR_WIDTH) -> str:
    n = round(p * width)
    return "#" * n + "." * (width - n)


def render(view: dict) -> str:
    lines = [
        f"Last character: {view['display_character']}",
        f"Current state:  {view['current_state']}",
        f"Sequence length: {view['sequence_length']}",
        "",
        "Predictions:",
    ]
    for p in view['predictions']:
        lines.append(f"  {p['display_character']:>4}  {p['state']:<12} {_bar(p['probability'])} {p['percent']:5.1f}%")
    lines.append("")
    lines.append("Transitions:")
    for name, prob in view['transition_row'].items():
        lines.append(f"  -> {name:<12} {_bar(prob)} {prob * 100:5.1f}%")
    st = view['stats']
    lines.append("")
    lines.append(f"Entropy: {st['entropy_bits']:.3f} bits | "
                 f"Top confidence: {st['top_confidence'] * 100:.1f}% | "
                 f"States: {st['active_states']}")
    return "\n".join(lines)


@app.command()
def predict(text: str = typer.Argument("")):
    """Show the ranked next characters for TEXT."""
    typer.echo(render(build_view(text)))


@app.command()
def graph(text: str = typer.Argument(""), threshold: float = typer.Option(None)):
    """List state transitions above the threshold."""
    g = build_graph(current_state_of(text), threshold)
    for node in g['nodes']:
        mark = "*" if node['current'] else " "
        typer.echo(f"{mark} {node['state']}")
    for e in g['edges']:
        typer.echo(f"  {e['source']} -> {e['target']} ({e['probability']:.2f})")


@app.command()
def interactive():
    """Type characters line by line; ':q' quits, ':c' clears the buffer."""
    session = PredictorSession()
    while True:
        chunk = typer.prompt(f"[{session.current_state.name}] {session.text!r}", default="",
                             show_default=False)
        if chunk == ":q":
            break
        if chunk == ":c":
            session.clear()
        else:
            session.append(chunk)
        typer.echo(render(build_view(session.text, engine=session.engine, result=session.result)))


@app.command()
def remote(text: str = typer.Argument("")):
    """Ask a running API for predictions."""
    try:
        r = requests.get(f"{BASE}/predict", params={"text": text}, headers=_headers(), timeout=10)
        r.raise_for_status()
    except requests.RequestException as e:
        typer.echo(f"request failed: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(r.json())


if __name__ == "__main__":
    app()
