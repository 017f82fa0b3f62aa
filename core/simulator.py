"""
Batch simulation runner.

The simulator drives the daily update engine over a fixed number of days,
collecting notifications and daily metrics. It is meant for analysis and
testing, not as the game's real-time clock.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime, date
from pathlib import Path
from typing import List, Dict, Optional
import logging
from tqdm import tqdm

from core.catalogs import Catalogs, default_catalogs
from core.data_export import MetricsRecorder
from core.engine import DailyUpdateEngine, DailyReport
from core.models import GameState, CABIN_ORDER

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


@dataclass
class SimulationConfig:
    """Configuration for a simulation run."""

    # Time period
    start_date: Optional[date] = None  # defaults to the initial state's date
    days: int = 365

    # Simulation parameters
    random_seed: Optional[int] = 42

    # Performance
    progress_bar: bool = True

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None

    # Output
    output_dir: str = "simulation_results"
    export_csv: bool = False  # Export daily metrics as CSV files
    export_log: bool = False  # Log to a timestamped file in output_dir when no log_file is set


@dataclass
class SimulationResults:
    """Results from a simulation run."""

    # Metadata
    config: SimulationConfig = None
    start_time: datetime = field(default_factory=datetime.now)
    end_time: Optional[datetime] = None

    # Final state
    final_state: Optional[GameState] = None
    days_simulated: int = 0

    # Totals
    total_income: float = 0.0
    total_expenses: float = 0.0
    total_passengers: int = 0
    accidents: int = 0

    # Detailed results
    notifications: List[str] = field(default_factory=list)
    daily_reports: List[DailyReport] = field(default_factory=list)

    # Exported files
    exported_files: Dict[str, str] = field(default_factory=dict)

    @property
    def duration_seconds(self) -> float:
        """Simulation run duration in seconds."""
        if self.end_time is None:
            return 0.0
        return (self.end_time - self.start_time).total_seconds()

    @property
    def net_profit(self) -> float:
        return self.total_income - self.total_expenses

    @property
    def average_daily_profit(self) -> float:
        if self.days_simulated == 0:
            return 0.0
        return self.net_profit / self.days_simulated

    def summary(self) -> str:
        """Generate summary report."""
        final_cash = self.final_state.cash if self.final_state else 0.0
        reputation = self.final_state.reputation.value if self.final_state else "-"
        return f"""
Simulation Results Summary
{'='*50}
Duration: {self.duration_seconds:.1f} seconds
Days Simulated: {self.days_simulated}
Total Income: {self.total_income:,.0f}
Total Expenses: {self.total_expenses:,.0f}
Net Profit: {self.net_profit:,.0f} ({self.average_daily_profit:,.0f}/day)
Passengers: {self.total_passengers:,}
Accidents: {self.accidents}
Final Cash: {final_cash:,.0f}
Final Reputation: {reputation}
"""


class Simulator:
    """
    Runs the airline economy for a number of consecutive days.

    Args:
        config: Simulation configuration
        initial_state: Game state the run starts from
        catalogs: Reference tables; the bundled defaults when omitted
    """

    def __init__(
        self,
        config: SimulationConfig,
        initial_state: GameState,
        catalogs: Optional[Catalogs] = None,
    ):
        if config.days < 0:
            raise ValueError(f"days must be non-negative, got {config.days}")

        self.config = config
        self.catalogs = catalogs or default_catalogs()
        self.initial_state = initial_state
        if config.start_date is not None and config.start_date != initial_state.date:
            self.initial_state = replace(initial_state, date=config.start_date)

        self.state = self.initial_state
        self.engine = DailyUpdateEngine(catalogs=self.catalogs, random_seed=config.random_seed)
        self.recorder = MetricsRecorder(output_dir=config.output_dir)
        self.results = SimulationResults(config=config)

        # Logging
        self._setup_logging()

    def _log_file_path(self) -> Optional[Path]:
        """Explicit ``log_file``, else a timestamped file when ``export_log`` is on."""
        if self.config.log_file:
            return Path(self.config.log_file)
        if self.config.export_log:
            timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
            return Path(self.config.output_dir) / f"simulation_{timestamp}.log"
        return None

    def _setup_logging(self) -> None:
        """Route every module logger through the root logger at the configured level."""
        handlers: List[logging.Handler] = [logging.StreamHandler()]
        self.log_file = self._log_file_path()
        if self.log_file is not None:
            self.log_file.parent.mkdir(parents=True, exist_ok=True)
            handlers.append(logging.FileHandler(self.log_file))

        logging.basicConfig(
            level=getattr(logging, self.config.log_level.upper()),
            format=LOG_FORMAT,
            handlers=handlers,
            force=True,
        )
        self.logger = logging.getLogger('Simulator')
        if self.log_file is not None:
            self.logger.info(f"Logging to file: {self.log_file}")

    def step(self) -> DailyReport:
        """Advance the simulation by a single day."""
        result = self.engine.tick(self.state)
        self.state = result.state

        report = result.report
        self.recorder.record(report)
        self.results.daily_reports.append(report)
        self.results.notifications.extend(result.notifications)
        self.results.days_simulated += 1
        self.results.total_income += report.income
        self.results.total_expenses += report.expenses
        self.results.total_passengers += sum(int(report.passengers[c]) for c in CABIN_ORDER)
        if report.accident:
            self.results.accidents += 1

        for message in result.notifications:
            self.logger.info(f"{report.date}: {message}")
        return report

    def run(self) -> SimulationResults:
        """
        Run the complete simulation.

        Returns:
            SimulationResults with totals, notifications and daily reports
        """
        self.logger.info("="*60)
        self.logger.info("Starting Simulation")
        self.logger.info("="*60)
        self.logger.info(f"Start: {self.state.date}, days: {self.config.days}")
        self.logger.info(f"Fleet: {len(self.state.fleet)} aircraft, "
                         f"opened routes: {sum(1 for r in self.state.routes if r.is_opened)}")

        self.results.start_time = datetime.now()

        pbar = None
        if self.config.progress_bar:
            pbar = tqdm(total=self.config.days, desc="Simulating Days")

        try:
            for _ in range(self.config.days):
                self.step()
                if pbar:
                    pbar.update(1)

        except Exception as e:
            self.logger.error(f"Simulation error: {e}", exc_info=True)
            raise

        finally:
            if pbar:
                pbar.close()
            self.results.end_time = datetime.now()
            self.results.final_state = self.state

        self.logger.info("="*60)
        self.logger.info("Simulation Complete")
        self.logger.info("="*60)
        self.logger.info(self.results.summary())

        if self.config.export_csv:
            self.logger.info("Exporting daily metrics to CSV files...")
            exported_files = self.recorder.export_all()
            self.results.exported_files = {k: str(v) for k, v in exported_files.items()}
            for data_type, filepath in exported_files.items():
                self.logger.info(f"  - {data_type}: {filepath}")
            self.logger.info(f"CSV exports complete: {len(exported_files)} files created")

        return self.results

    def reset(self) -> None:
        """Reset simulator to its initial state."""
        self.state = self.initial_state
        self.engine = DailyUpdateEngine(catalogs=self.catalogs, random_seed=self.config.random_seed)
        self.recorder = MetricsRecorder(output_dir=self.config.output_dir)
        self.results = SimulationResults(config=self.config)
