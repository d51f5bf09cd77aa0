"""
Command line entry point for flightdesk.

Usage:
    flightdesk init-db                 # Create tables
    flightdesk seed                    # Replace data with sample records
    flightdesk list-airports --search lisbon
    flightdesk report                  # Flight report with totals
    flightdesk distance JFK LHR        # Great-circle distance between airports
"""

from typing import Optional

import typer
from rich.console import Console
from rich.table import Table
from rich import box

from .database.config import initialize_database
from .seed import DatabaseSeeder
from .services import AirportService, FlightService, calculate_distance
from .utils.config import configure_logging, get_config

app = typer.Typer(
    help="Manage airports, aircraft and flights with derived flight metrics",
    add_completion=False
)
console = Console()


def _database():
    config = get_config()
    configure_logging(config)
    return initialize_database(database_url=config.database_url, echo=config.database_echo)


@app.command("init-db")
def init_db():
    """Create the database tables."""
    db_config = _database()
    info = db_config.get_connection_info()
    console.print(f"[green]✓[/green] Tables ready on {info['database_type']} ({info['database_url']})")


@app.command()
def seed(
    airports: Optional[int] = typer.Option(None, help="Number of airports"),
    aircraft: Optional[int] = typer.Option(None, help="Number of aircraft"),
    flights: Optional[int] = typer.Option(None, help="Number of flights"),
):
    """Replace all data with reproducible sample records."""
    config = get_config()
    db_config = _database()

    with db_config.get_session_context() as session:
        seeder = DatabaseSeeder(session, seed=config.seed_random_seed)
        summary = seeder.seed(
            airports=airports if airports is not None else config.seed_airports,
            aircraft=aircraft if aircraft is not None else config.seed_aircraft,
            flights=flights if flights is not None else config.seed_flights,
        )

    console.print(
        f"[green]✓[/green] Seeded {summary.airports} airports, "
        f"{summary.aircraft} aircraft and {summary.flights} flights"
    )


@app.command("list-airports")
def list_airports(
    search: Optional[str] = typer.Option(None, "--search", "-s", help="Match name, city or code"),
):
    """List airports, optionally filtered."""
    db_config = _database()

    with db_config.get_session_context() as session:
        service = AirportService.from_session(session)
        airports = service.search(search) if search else service.get_all()

    table = Table(title="Airports", box=box.ROUNDED)
    table.add_column("Code", style="cyan", no_wrap=True)
    table.add_column("Name")
    table.add_column("City")
    table.add_column("Country")
    table.add_column("Lat", justify="right")
    table.add_column("Lon", justify="right")

    for airport in airports:
        table.add_row(
            airport.code,
            airport.name,
            airport.city,
            airport.country,
            f"{airport.latitude:.4f}",
            f"{airport.longitude:.4f}",
        )

    console.print(table)


@app.command()
def report():
    """Print the flight report with totals and averages."""
    db_config = _database()

    with db_config.get_session_context() as session:
        flight_report = FlightService.from_session(session).get_flight_report()

    table = Table(title="Flight Report", box=box.ROUNDED)
    table.add_column("Flight", style="cyan", no_wrap=True)
    table.add_column("From")
    table.add_column("To")
    table.add_column("Aircraft")
    table.add_column("Departure")
    table.add_column("Distance (km)", justify="right")
    table.add_column("Time (h)", justify="right")
    table.add_column("Fuel (L)", justify="right")
    table.add_column("Status")

    for item in flight_report.flights:
        table.add_row(
            item.flight_number,
            item.departure_airport_code,
            item.destination_airport_code,
            f"{item.aircraft_model} ({item.aircraft_registration})",
            item.scheduled_departure.strftime("%Y-%m-%d %H:%M"),
            f"{item.distance_km:,.1f}",
            f"{item.estimated_flight_time_hours:.2f}",
            f"{item.fuel_required_liters:,.1f}",
            item.status,
        )

    console.print(table)
    console.print(
        f"Flights: [bold]{flight_report.total_flights}[/bold]  "
        f"Distance: [bold]{flight_report.total_distance_km:,.1f} km[/bold]  "
        f"Fuel: [bold]{flight_report.total_fuel_liters:,.1f} L[/bold]  "
        f"Time: [bold]{flight_report.total_flight_time_hours:.2f} h[/bold]"
    )
    console.print(
        f"Average distance: {flight_report.average_distance_km:,.1f} km  "
        f"Average fuel: {flight_report.average_fuel_liters:,.1f} L"
    )


@app.command()
def distance(
    origin: str = typer.Argument(..., help="Departure airport code"),
    destination: str = typer.Argument(..., help="Destination airport code"),
):
    """Great-circle distance between two stored airports."""
    db_config = _database()

    with db_config.get_session_context() as session:
        service = AirportService.from_session(session)
        start = service.get_by_code(origin.upper())
        end = service.get_by_code(destination.upper())

    for code, airport in ((origin, start), (destination, end)):
        if airport is None:
            console.print(f"[red]✗[/red] Unknown airport code: {code}")
            raise typer.Exit(code=1)

    km = calculate_distance(start.latitude, start.longitude, end.latitude, end.longitude)
    console.print(f"{start.code} → {end.code}: [bold]{km:,.1f} km[/bold]")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
