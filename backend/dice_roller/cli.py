import click
from flask import current_app
from flask.cli import with_appcontext

from dice_roller.client import DiceRollerClient, GameApiClient


def _format_dice(label: str, dice, total: int) -> str:
    faces = ' '.join(f'[{value}]' for value in dice)
    return f'{label:<9}{faces}  Total: {total}'


def _winner_banner(winner: str) -> str:
    if winner == 'tie':
        return "It's a Tie!"
    return f"{'Player' if winner == 'player' else 'Computer'} Wins!"


def render(client: DiceRollerClient) -> None:
    if client.error:
        click.secho(client.error, fg='red')
    click.echo(_format_dice('Player', client.player_dice, client.player_total))
    click.echo(_format_dice('Computer', client.computer_dice, client.computer_total))
    if client.winner:
        click.secho(_winner_banner(client.winner), fg='yellow', bold=True)

    stats = client.stats
    if stats:
        click.echo('')
        click.echo('Game Statistics')
        click.echo(f"  Total Games: {stats['totalGames']}  Player Win Rate: {stats['playerWinRate']}%")
        click.echo(
            f"  Player Wins: {stats['playerWins']}  Computer Wins: {stats['computerWins']}  Ties: {stats['ties']}"
        )
    if client.history:
        click.echo('')
        click.echo('Recent Games')
        for game in client.history:
            outcome = 'Tie Game' if game['winner'] == 'tie' else f"{game['winner']} won"
            click.echo(f"  {game['timestamp']}: {outcome} ({game['playerScore']} vs {game['computerScore']})")


@click.command('play')
@click.option('--url', default=None, help='Game server base URL (defaults to DICE_API_URL).')
@click.option('--delay', type=float, default=None, help='Seconds to wait before showing a roll.')
@with_appcontext
def play_command(url, delay):
    """Play the dice game against a running server from the terminal."""
    cfg = current_app.config
    api = GameApiClient(
        url or cfg.get('DICE_API_URL', 'http://localhost:5000'),
        timeout=float(cfg.get('CLIENT_TIMEOUT_SEC', 5)),
    )
    client = DiceRollerClient(
        api,
        roll_delay=delay if delay is not None else float(cfg.get('ROLL_DISPLAY_DELAY_SEC', 1.0)),
    )
    client.load()
    render(client)

    while True:
        choice = click.prompt(
            '\n[r]oll, re[s]et, [q]uit',
            type=click.Choice(['r', 's', 'q']),
            default='r',
            show_choices=False,
        )
        if choice == 'q':
            break
        if choice == 's':
            client.reset()
        else:
            click.echo('Rolling...')
            client.roll()
        render(client)
