from __future__ import annotations

import argparse
import json
import sys

import uvicorn

from wordgraph.config import DEFAULT_DOT_PATH, DEFAULT_IMAGE_PATH, GraphConfig
from wordgraph.errors import WordGraphError
from wordgraph.logging_utils import configure_logging
from wordgraph.pipeline import run_pipeline


def cmd_build(args: argparse.Namespace) -> int:
	config = GraphConfig(
		input_path=args.input,
		dot_path=args.dot,
		fold_case=not args.keep_case,
		order=args.order,
		print_report=not args.quiet,
		render_image=args.render,
		image_path=args.image,
		image_format=args.format,
		layout_command=args.layout_command,
	)
	try:
		outcome = run_pipeline(config)
	except WordGraphError as e:
		print(f"error: {e.message}", file=sys.stderr)
		return 2 if e.kind == "invalid-parameter" else 1

	if args.summary:
		print(json.dumps(outcome.summary.model_dump(), indent=2), file=sys.stderr)
	if outcome.image_path:
		print(f"Graph image saved to {outcome.image_path}", file=sys.stderr)
	return 0


def cmd_serve(args: argparse.Namespace) -> int:
	uvicorn.run("api:app", host=args.host, port=args.port, reload=args.reload)
	return 0


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(prog="wordgraph")
	parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
	parser.add_argument("--log-json", action="store_true", help="Emit logs as JSON lines")
	sub = parser.add_subparsers(dest="cmd", required=True)

	pb = sub.add_parser("build", help="Build the word graph of a text file and write a DOT file")
	pb.add_argument("input", nargs="?", default="", help="Text file, relative to the working directory")
	pb.add_argument("--dot", default=DEFAULT_DOT_PATH, help="Where to write the DOT document")
	pb.add_argument("--render", action="store_true", help="Also rasterize with the layout tool")
	pb.add_argument("--image", default=DEFAULT_IMAGE_PATH, help="Where the layout tool writes the image")
	pb.add_argument("--format", default="png", help="Image format passed to the layout tool")
	pb.add_argument("--layout-command", default="dot")
	pb.add_argument("--order", choices=["sorted", "insertion"], default="sorted")
	pb.add_argument("--keep-case", action="store_true", help="Do not lowercase tokens")
	pb.add_argument("--quiet", action="store_true", help="Do not print the adjacency listing")
	pb.add_argument("--summary", action="store_true", help="Print graph counts as JSON to stderr")
	pb.set_defaults(func=cmd_build)

	ps = sub.add_parser("serve", help="Run FastAPI server")
	ps.add_argument("--host", default="127.0.0.1")
	ps.add_argument("--port", type=int, default=8000)
	ps.add_argument("--reload", action="store_true")
	ps.set_defaults(func=cmd_serve)
	return parser


def main(argv=None) -> int:
	parser = build_parser()
	args = parser.parse_args(argv)
	configure_logging(args.log_level, json_logs=args.log_json)
	return args.func(args)


if __name__ == "__main__":
	sys.exit(main())
