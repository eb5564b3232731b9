# ABOUTME: Rich renderables for the terminal front end.
# ABOUTME: Shows whichever page state wins (loading, error, weather) plus suggestions and geolocation errors.

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from weather_lookup.location import pick_city
from weather_lookup.models import Suggestion, WeatherSnapshot
from weather_lookup.page import PageView, WeatherPage


def render_page(page: WeatherPage) -> RenderableType:
    view = page.view
    if view is PageView.LOADING:
        return Text("Carregando...", style="dim")
    if view is PageView.ERROR:
        return Text(page.error, style="bold red")
    if view is PageView.WEATHER:
        return render_weather(page.weather)
    return Text("Digite o nome da cidade...", style="dim")


def render_weather(weather: WeatherSnapshot) -> RenderableType:
    current = Table.grid(padding=(0, 2))
    current.add_row(Text(weather.conditions, style="dim"), Text(f"{weather.temperature}°C", style="bold"))
    current.add_row("Velocidade do vento", f"{weather.wind_speed} km/h")
    current.add_row("Umidade", f"{weather.humidity}%")
    current.add_row("Precipitação", f"{weather.precipitation}%")

    hourly = Table(title="Previsão de 24 horas", show_header=True, header_style="bold")
    hourly.add_column("Hora")
    hourly.add_column("Temp.", justify="right")
    hourly.add_column("Condições")
    for hour in weather.hourly_forecast:
        hourly.add_row(hour.hour_label, f"{hour.temp}°C", hour.conditions)

    return Group(Panel(current, title=weather.location), hourly)


def render_suggestions(suggestions: list[Suggestion], country_name: str) -> RenderableType:
    if not suggestions:
        return Text("Nenhuma sugestão", style="dim")
    table = Table(show_header=False, box=None)
    for index, suggestion in enumerate(suggestions, start=1):
        table.add_row(
            str(index),
            pick_city(suggestion.address) or "",
            Text(f"{suggestion.address.state}, {country_name}", style="dim"),
        )
    return table


def render_geo_error(message: str) -> RenderableType:
    return Text(message, style="red")
