"""Command-line interface for fretlab.

Provides commands for:
- detect: Name the chord formed by a set of notes
- chord: Show the notes of a chord symbol
- voicings: Find guitar fingerings for a chord
- scale: Show a scale and its diatonic chords
- progression: Build, transpose and export chord progressions
- export: Write a single chord to a MIDI file
"""

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .core import FretlabError, midi_to_note, parse_note
from .core.constants import DEFAULT_MAX_FRET, DEFAULT_TEMPO

app = typer.Typer(
    name="fretlab",
    help="Guitar chord, scale and progression toolkit",
    rich_markup_mode="markdown",
)
console = Console()


def setup_logging(verbose: bool = False) -> None:
    """Route library log records through rich."""
    root = logging.getLogger()
    for handler in list(root.handlers):
        if isinstance(handler, RichHandler):
            root.removeHandler(handler)
    root.addHandler(RichHandler(console=Console(stderr=True), show_path=False))
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)


@app.callback()
def main_callback(
    verbose: bool = typer.Option(
        False, "-v", "--verbose", help="Verbose output"
    ),
):
    setup_logging(verbose)


def _parse_note_arg(text: str) -> int:
    """Accept a MIDI number ("60") or a note name with octave ("C4")."""
    if text.lstrip("-").isdigit():
        return int(text)
    return parse_note(text)


def _split(text: Optional[str]) -> List[str]:
    if not text:
        return []
    return [part.strip() for part in text.replace(" ", ",").split(",") if part.strip()]


def _fail(error: Exception) -> None:
    console.print(f"[red]Error: {error}[/red]")
    raise typer.Exit(1)


@app.command()
def detect(
    notes: List[str] = typer.Argument(..., help="Notes as MIDI numbers or names, e.g. C4 E4 G4"),
    limit: int = typer.Option(5, "-n", "--limit", help="Number of candidates to show"),
):
    """Detect the chord formed by a set of notes.

    Examples:
        fretlab detect C4 E4 G4
        fretlab detect 57 60 64 67
    """
    from .inference import ChordDetector, DetectionConfig

    try:
        midi_notes = [_parse_note_arg(n) for n in notes]
    except FretlabError as e:
        _fail(e)

    detector = ChordDetector(DetectionConfig(max_results=limit))
    detected = detector.detect(midi_notes)

    if not detected:
        console.print("[yellow]No chord matches these notes[/yellow]")
        return

    table = Table(title="Chord Candidates")
    table.add_column("Chord", style="cyan")
    table.add_column("Type", style="green")
    table.add_column("Confidence", style="magenta")
    table.add_column("Missing", style="yellow")
    table.add_column("Extra", style="red")

    for chord in detected[:limit]:
        table.add_row(
            chord.symbol,
            chord.chord_type,
            f"{chord.confidence:.2f}",
            _pitch_names(chord.missing_notes),
            _pitch_names(chord.extra_notes),
        )
    console.print(table)

    best = detector.most_likely(detected)
    console.print(f"\n[green]Most likely: {best.format()}[/green]")


@app.command()
def chord(
    symbol: str = typer.Argument(..., help="Chord symbol, e.g. Am7"),
    flats: bool = typer.Option(False, "--flats", help="Spell notes with flats"),
):
    """Show the notes of a chord symbol."""
    from .theory import chord_from_symbol, get_chord_definition

    try:
        parsed = chord_from_symbol(symbol)
    except FretlabError as e:
        _fail(e)
    if parsed is None:
        console.print(f"[red]Error: Unrecognized chord symbol: {symbol}[/red]")
        raise typer.Exit(1)

    definition = get_chord_definition(parsed.chord_type)
    names = " ".join(str(midi_to_note(n, use_flats=flats)) for n in parsed.notes)
    console.print(f"[bold]{parsed.symbol}[/bold] ({definition.name})")
    console.print(f"  Notes: {names}")
    console.print(f"  Intervals: {', '.join(str(i) for i in definition.intervals)}")


@app.command()
def voicings(
    symbol: str = typer.Argument(..., help="Chord symbol, e.g. G or Em7"),
    tuning: str = typer.Option("standard", "-t", "--tuning", help="Tuning key (standard, dropD, openG, openD, dadgad)"),
    max_fret: int = typer.Option(DEFAULT_MAX_FRET, "--max-fret", help="Highest usable fret"),
    max_span: int = typer.Option(4, "--max-span", help="Widest comfortable fret span"),
):
    """Find guitar voicings for a chord.

    Examples:
        fretlab voicings C
        fretlab voicings Dm7 --tuning dadgad
    """
    from .theory import chord_from_symbol, get_tuning
    from .fretboard import generate_voicings, get_preset_voicing, is_voicing_playable

    try:
        parsed = chord_from_symbol(symbol)
    except FretlabError as e:
        _fail(e)
    if parsed is None:
        console.print(f"[red]Error: Unrecognized chord symbol: {symbol}[/red]")
        raise typer.Exit(1)

    selected = get_tuning(tuning)
    found = generate_voicings(parsed.notes, selected, max_fret)
    preset = get_preset_voicing(parsed.root, parsed.chord_type, selected)

    table = Table(title=f"{parsed.symbol} in {selected.name}")
    table.add_column("Source", style="cyan")
    table.add_column("Frets", style="green")
    table.add_column("Span", style="yellow")
    table.add_column("Playable", style="magenta")

    rows = ([("preset", preset)] if preset else []) + [("search", v) for v in found]
    for source, voicing in rows:
        table.add_row(
            source,
            voicing.to_tab(),
            str(voicing.span),
            "yes" if is_voicing_playable(voicing, max_span) else "no",
        )

    if not rows:
        console.print("[yellow]No voicings found[/yellow]")
        return
    console.print(table)


@app.command()
def scale(
    root: str = typer.Argument(..., help="Scale root, e.g. A"),
    scale_type: str = typer.Argument("major", help="Scale type, e.g. minor, dorian, blues"),
    flats: bool = typer.Option(False, "--flats", help="Spell notes with flats"),
):
    """Show a scale and its diatonic chords."""
    from .theory import SCALE_TYPES, generate_scale, get_diatonic_chords

    try:
        notes = generate_scale(root, scale_type)
    except FretlabError as e:
        _fail(e)

    console.print(f"[bold]{root} {SCALE_TYPES[scale_type].name}[/bold]")
    console.print("  Notes: " + " ".join(midi_to_note(n, use_flats=flats).name for n in notes))

    diatonic = get_diatonic_chords(root, scale_type)
    if diatonic:
        console.print("  Diatonic chords: " + " ".join(diatonic))


@app.command()
def progression(
    preset: Optional[str] = typer.Option(None, "-p", "--preset", help="Preset name, e.g. ii-V-I"),
    roman: Optional[str] = typer.Option(None, "-r", "--roman", help="Roman numerals, e.g. I,V,vi,IV"),
    symbols: Optional[str] = typer.Option(None, "-s", "--symbols", help="Chord symbols, e.g. Am,F,C,G"),
    key: str = typer.Option("C", "-k", "--key", help="Key root"),
    transpose_to: Optional[str] = typer.Option(None, "--transpose", help="Transpose to this key"),
    tempo: float = typer.Option(DEFAULT_TEMPO, "--tempo", help="Tempo (BPM)"),
    output: Optional[Path] = typer.Option(None, "-o", "--output", help="Output MIDI file path"),
    name: str = typer.Option("Progression", "--name", help="Track name"),
):
    """Build a chord progression, optionally transpose and export it.

    Examples:
        fretlab progression --preset 12-bar-blues --key A
        fretlab progression --roman I,vi,IV,V --key G -o out.mid
        fretlab progression --symbols Am7,D7,Gmaj7 --transpose C
    """
    from .theory import (
        COMMON_PROGRESSIONS,
        create_progression_from_roman,
        create_progression_from_symbols,
        transpose_progression,
    )
    from .output import MIDIExporter

    try:
        if preset:
            if preset not in COMMON_PROGRESSIONS:
                console.print(f"[red]Error: Unknown preset: {preset}[/red]")
                console.print("Available: " + ", ".join(COMMON_PROGRESSIONS))
                raise typer.Exit(1)
            prog = create_progression_from_roman(preset, key, COMMON_PROGRESSIONS[preset], tempo)
        elif roman:
            prog = create_progression_from_roman(name, key, _split(roman), tempo)
        elif symbols:
            prog = create_progression_from_symbols(name, key, _split(symbols), tempo)
        else:
            console.print("[red]Error: Provide --preset, --roman or --symbols[/red]")
            raise typer.Exit(1)

        if transpose_to:
            prog = transpose_progression(prog, transpose_to)
    except FretlabError as e:
        _fail(e)

    table = Table(title=f"{prog.name} in {prog.key}")
    table.add_column("#", style="dim")
    table.add_column("Chord", style="cyan")
    table.add_column("Roman", style="green")
    table.add_column("Beats", style="yellow")

    for i, pc in enumerate(prog.chords, start=1):
        table.add_row(str(i), pc.chord.symbol, pc.roman_numeral or "", f"{pc.duration:g}")
    console.print(table)

    if output:
        try:
            path = MIDIExporter().export(prog, str(output))
        except ValueError as e:
            _fail(e)
        console.print(f"\n[green][OK] MIDI saved to: {path}[/green]")


@app.command()
def export(
    symbol: str = typer.Argument(..., help="Chord symbol, e.g. Cmaj7"),
    output: Path = typer.Option(..., "-o", "--output", help="Output MIDI file path"),
    duration: float = typer.Option(4.0, "-d", "--duration", help="Length in beats"),
    tempo: float = typer.Option(DEFAULT_TEMPO, "-t", "--tempo", help="Tempo (BPM)"),
):
    """Write a single chord to a MIDI file."""
    from .theory import chord_from_symbol
    from .output import MIDIExporter

    try:
        parsed = chord_from_symbol(symbol)
    except FretlabError as e:
        _fail(e)
    if parsed is None:
        console.print(f"[red]Error: Unrecognized chord symbol: {symbol}[/red]")
        raise typer.Exit(1)

    try:
        path = MIDIExporter().export(parsed, str(output), duration, tempo)
    except ValueError as e:
        _fail(e)
    console.print(f"[green][OK] MIDI saved to: {path}[/green]")


def _pitch_names(pitch_classes: Optional[List[int]]) -> str:
    if not pitch_classes:
        return ""
    return " ".join(midi_to_note(pc).name for pc in pitch_classes)


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
