import argparse
import json
import sys
from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table
from src.config import settings
from src.core.errors import FeedError, FetchTimeout
from src.core.feed import FeedRequest, FeedKind
from src.models.analytics import ChannelSnapshot
from src.providers.youtube import YouTubeFeedProvider
from src.services.analytics import build_snapshot
from src.utils.logger import logger

console = Console()

def render_videos(title: str, snapshot: ChannelSnapshot, limit: int):
    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("Published", style="cyan", width=12)
    table.add_column("Video", style="white")
    table.add_column("Author", style="dim")

    for video in snapshot.videos[:limit]:
        published = video.published_at[:10] if video.published_at else "-"
        table.add_row(published, f"[bold]{video.title}[/bold]\n[dim]{video.link}[/dim]", video.author)

    console.print(table)

def render_metrics(snapshot: ChannelSnapshot):
    lines = [
        f"[bold]Latest upload:[/bold] {snapshot.latest_upload or '-'}",
        f"[bold]Upload cadence:[/bold] [magenta]{snapshot.upload_cadence}[/magenta]",
        f"[bold]Avg. length:[/bold] {snapshot.average_length}",
    ]
    console.print(Panel("\n".join(lines), title="Channel health", border_style="green"))

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="YouTube feed analytics")
    sub = parser.add_subparsers(dest="command")

    trending = sub.add_parser("trending", help="Show the trending feed for a region")
    trending.add_argument("--region", default=settings.DEFAULT_REGION, help="Region code (default: US)")

    channel = sub.add_parser("channel", help="Analyze the latest uploads of a channel")
    channel.add_argument("channel_id", help="Channel ID, e.g. UC_x5XG1OV2P6uZZ5FSM9Ttw")

    for p in (trending, channel):
        p.add_argument("--json", action="store_true", help="Print JSON instead of tables")
        p.add_argument("--limit", type=int, default=6, help="Rows to display (default: 6)")
        p.add_argument("--timeout", type=float, help="Request timeout in seconds")
    return parser

def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 2

    if args.command == "trending":
        request = FeedRequest.trending(args.region.strip())
    else:
        channel_id = args.channel_id.strip()
        if not channel_id:
            console.print("[red]Missing channel ID.[/red]")
            return 2
        request = FeedRequest.channel(channel_id)

    provider = YouTubeFeedProvider(timeout=args.timeout)

    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            transient=True,
            console=console,
        ) as progress:
            task = progress.add_task(description=f"Pulling {request.label}...", total=None)
            videos = provider.get_videos(request)
            progress.update(task, completed=True)
    except FetchTimeout as e:
        console.print(f"[bold red]Timeout:[/bold red] {e}")
        return 1
    except FeedError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        return 1

    snapshot = build_snapshot(videos)
    logger.debug(f"Loaded {len(videos)} videos for {request.kind.value}")

    if args.json:
        payload = {"videos": [v.to_api() for v in videos]}
        if request.kind == FeedKind.CHANNEL:
            payload["analytics"] = snapshot.model_dump(by_alias=True, exclude={"videos"})
        print(json.dumps(payload, ensure_ascii=False, indent=2))
        return 0

    if not videos:
        console.print("[yellow]Feed returned no videos.[/yellow]")
        return 0

    if request.kind == FeedKind.TRENDING:
        render_videos(f"Trending in {request.value}", snapshot, args.limit)
    else:
        render_metrics(snapshot)
        render_videos("Recent uploads", snapshot, args.limit)
    return 0

if __name__ == "__main__":
    sys.exit(main())
