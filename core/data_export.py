"""
Daily metrics collection and export.

This module turns the engine's daily reports into tabular data:
- daily_metrics.csv: cash, income, expenses, passengers and scores per day
- route_metrics.csv: supply, demand, passengers, cost and revenue per route per day
"""

from datetime import datetime
from pathlib import Path
from typing import List, Dict, Any
import logging

import pandas as pd

from core.models import CABIN_ORDER

logger = logging.getLogger(__name__)


class MetricsRecorder:
    """
    Collect daily reports and export them for analysis.

    Rows are kept in memory; ``daily_frame`` and ``route_frame`` build pandas
    DataFrames on demand and ``export_all`` writes them as CSV files.
    """

    def __init__(self, output_dir: str = "simulation_output"):
        """
        Initialize metrics recorder.

        Args:
            output_dir: Directory to save CSV files
        """
        self.output_dir = Path(output_dir)
        self.daily_rows: List[Dict[str, Any]] = []
        self.route_rows: List[Dict[str, Any]] = []

    def record(self, report) -> None:
        """Record one ``DailyReport``."""
        row = {
            'date': report.date,
            'cash': report.cash,
            'income': report.income,
            'expenses': report.expenses,
            'profit': report.profit,
        }
        for cabin in CABIN_ORDER:
            row[f'passengers_{cabin.value}'] = report.passengers.get(cabin, 0.0)
        row['on_time_performance'] = report.on_time_performance
        row['passenger_satisfaction'] = report.passenger_satisfaction
        row['reputation'] = report.reputation.value
        row['accident'] = report.accident
        self.daily_rows.append(row)

        for route_id, stats in report.route_stats.items():
            route_row = {'date': report.date, 'route_id': route_id}
            for i, cabin in enumerate(CABIN_ORDER):
                route_row[f'supply_{cabin.value}'] = float(stats.supply[i])
                route_row[f'demand_{cabin.value}'] = float(stats.demand[i])
                route_row[f'passengers_{cabin.value}'] = float(stats.passengers[i])
            route_row['cost'] = stats.cost
            route_row['revenue'] = stats.revenue
            route_row['load_factor'] = stats.load_factor
            self.route_rows.append(route_row)

    def daily_frame(self) -> pd.DataFrame:
        """One row per simulated day, indexed by date."""
        df = pd.DataFrame(self.daily_rows)
        if not df.empty:
            df = df.set_index('date')
        return df

    def route_frame(self) -> pd.DataFrame:
        """One row per opened route per simulated day."""
        return pd.DataFrame(self.route_rows)

    def route_summary(self) -> pd.DataFrame:
        """Totals per route across the whole run, most profitable first."""
        df = self.route_frame()
        if df.empty:
            return df
        summary = df.groupby('route_id')[['cost', 'revenue']].sum()
        summary['profit'] = summary['revenue'] - summary['cost']
        return summary.sort_values('profit', ascending=False)

    def export_all(self) -> Dict[str, Path]:
        """
        Export all collected data to CSV files.

        Returns:
            Dictionary mapping data type to file path
        """
        self.output_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')

        exported = {}
        daily_path = self.output_dir / f"daily_metrics_{timestamp}.csv"
        self.daily_frame().to_csv(daily_path)
        exported['daily_metrics'] = daily_path

        route_path = self.output_dir / f"route_metrics_{timestamp}.csv"
        self.route_frame().to_csv(route_path, index=False)
        exported['route_metrics'] = route_path

        logger.info(f"Exported {len(self.daily_rows)} daily rows and "
                    f"{len(self.route_rows)} route rows to {self.output_dir}")
        return exported
