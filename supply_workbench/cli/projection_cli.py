"""
Command line interface for inventory projections.

Projects inventory for the series matching a product/location filter and
prints the day-by-day projection, its summary, or the monthly chart data.
"""
import argparse
import logging
import sys

from tabulate import tabulate

from supply_workbench.db import get_db_interface
from supply_workbench.exceptions import SupplyWorkbenchError
from supply_workbench.logging_setup import get_logger, logger as log_manager
from supply_workbench.services import InventoryDataService, ProjectionService
from supply_workbench.utils.date_utils import convert_to_date

logger = get_logger('projection_cli')

PROJECTION_HEADERS = [
    'Date', 'Projected', 'Demand', 'Cumulative', 'Safety Stock', 'Reorder Point', 'Status'
]

def _parse_date(value):
    try:
        return convert_to_date(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))

def build_service(args):
    """Build a projection service reading from the configured database."""
    return ProjectionService(InventoryDataService(get_db_interface()), max_workers=args.workers)

def format_projection_rows(projections):
    """Turn ProjectionDay records into table rows."""
    return [
        [
            day.date.isoformat(),
            f"{day.projected_inventory:,.1f}",
            f"{day.forecast_demand:,.1f}",
            f"{day.cumulative_demand:,.1f}",
            f"{day.safety_stock:,.1f}",
            f"{day.reorder_point:,.1f}",
            str(day.status)
        ]
        for day in projections
    ]

def format_summary_rows(results):
    """Turn SeriesProjection records into summary table rows."""
    rows = []
    for result in results:
        summary = result.summary
        if summary is None:
            rows.append([result.product_id, result.location_id, '-', '-', '-', '-', '-', 'no data'])
            continue
        rows.append([
            result.product_id,
            result.location_id,
            summary.stockout_days,
            summary.critical_days,
            summary.warning_days,
            f"{summary.min_inventory:,.1f}",
            f"{summary.total_demand:,.1f}",
            str(summary.risk_level)
        ])
    return rows

def run_projection(args, service):
    """Project inventory and print the results."""
    results = service.calculate_projections(
        product_id=args.product,
        location_id=args.location,
        projection_days=args.days,
        today=args.today
    )

    if not results:
        print("No inventory series found")
        return 0

    if not args.summary_only:
        for result in results:
            print(f"\nSeries {result.series_id}: product {result.product_id} at {result.location_id}")
            if not result.projections:
                print("  No inventory observations")
                continue
            print(tabulate(format_projection_rows(result.projections), headers=PROJECTION_HEADERS))

    print("\nSummary:")
    print(tabulate(
        format_summary_rows(results),
        headers=['Product', 'Location', 'Stockout', 'Critical', 'Warning', 'Min Inventory', 'Total Demand', 'Risk']
    ))
    return 0

def run_chart(args, service):
    """Print the monthly chart data."""
    monthly = service.get_chart_data(product_id=args.product, location_id=args.location)

    if not monthly:
        print("No inventory series found")
        return 0

    rows = [
        [point['projection_month'], f"{point['forecasted_demand']:,.1f}", f"{point['projected_ending_inventory']:,.1f}"]
        for point in monthly
    ]
    print(tabulate(rows, headers=['Month', 'Forecasted Demand', 'Projected Ending Inventory']))
    return 0

def build_parser():
    """Build the argument parser."""
    parser = argparse.ArgumentParser(description='Inventory projection CLI')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable verbose logging')
    parser.add_argument('--workers', type=int, help='Number of series projected in parallel')
    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    project_parser = subparsers.add_parser('project', help='Project inventory day by day')
    project_parser.add_argument('--product', help='Filter by product ID')
    project_parser.add_argument('--location', help='Filter by location ID')
    project_parser.add_argument('--days', type=int, help='Projection horizon in days')
    project_parser.add_argument('--today', type=_parse_date, help='Day 0 of the projection (YYYY-MM-DD)')
    project_parser.add_argument('--summary-only', action='store_true', help='Print only the summary table')

    chart_parser = subparsers.add_parser('chart', help='Monthly demand and ending inventory')
    chart_parser.add_argument('--product', help='Filter by product ID')
    chart_parser.add_argument('--location', help='Filter by location ID')

    return parser

def main(argv=None, service=None):
    """Main entry point for the command line interface."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        log_manager.set_level(logging.DEBUG)

    if args.command not in ('project', 'chart'):
        parser.print_help()
        return 1

    logger.info(f"Running {args.command} with arguments: {vars(args)}")

    try:
        service = service or build_service(args)
        if args.command == 'project':
            return run_projection(args, service)
        return run_chart(args, service)
    except SupplyWorkbenchError as e:
        logger.error(f"Error running {args.command}: {e}", exc_info=True)
        return 1

if __name__ == '__main__':
    sys.exit(main())
