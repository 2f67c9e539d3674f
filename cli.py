"""Simple CLI for the proxy handler.

Usage examples:
- Free text:
  python cli.py "Write a haiku about autumn"

- Structured suggestions:
  python cli.py "Suggest three names for a cat" --json --pretty

Notes:
- Settings come from the environment (GEMINI_API_KEY etc.), same as the deployed function.
- This CLI is strictly a single call executor. No multi-turn, no retries.
"""
import argparse
import json

from src.gemini_proxy.handler import ProxyHandler
from src.gemini_proxy.logging_util import get_logger
from src.gemini_proxy.settings import load_settings
from src.gemini_proxy.types import InboundRequest

logger = get_logger(__name__)

def main(argv=None) -> int:
    ap = argparse.ArgumentParser()
    ap.add_argument("prompt", help="Prompt text, or @path/to/file.txt")
    ap.add_argument("--json", action="store_true", help="Request the structured suggestions output")
    ap.add_argument("--pretty", action="store_true", help="Pretty print the response body")
    args = ap.parse_args(argv)

    prompt = args.prompt
    if prompt.startswith("@"):
        try:
            with open(prompt[1:], encoding="utf-8") as f:
                prompt = f.read()
        except OSError as e:
            logger.error("Failed to read prompt file: %s", e)
            return 2

    body = json.dumps({"prompt": prompt, "isJson": args.json})
    handler = ProxyHandler(load_settings())
    resp = handler.handle(InboundRequest(method="POST", body=body), request_id="CLI")

    out = resp.body
    if args.pretty and out:
        out = json.dumps(json.loads(out), ensure_ascii=False, indent=2)

    print(f"status={resp.status_code}")
    print(out)
    return 0 if resp.status_code == 200 else 1

if __name__ == "__main__":
    raise SystemExit(main())
