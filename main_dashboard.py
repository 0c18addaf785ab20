from __future__ import annotations

from datetime import datetime

from smart_neighborhood import DashboardApplication


def main() -> None:
    app = DashboardApplication()
    summary = app.run_report(reference_time=datetime.now(), seed=123)
    print(f"Report saved to: {summary['output_dir']}")


if __name__ == "__main__":
    main()
