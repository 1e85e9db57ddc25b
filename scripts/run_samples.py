# scripts/run_samples.py
import argparse
import logging

from job_search.main import run


def main():
    parser = argparse.ArgumentParser(description="Run the job search samples.")
    parser.add_argument("--config", default="config/config.yaml")
    parser.add_argument("--verbose", action="store_true", help="Log requests at DEBUG level.")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="[%(levelname)s] %(name)s: %(message)s",
    )
    run(args.config)


if __name__ == "__main__":
    main()
