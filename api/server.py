"""FastAPI server exposing the move-legality queries."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from movecore.board import Board
from movecore.constants import INITIAL_PLACEMENT, QUEEN, Square, parse_square, square_name
from movecore.game import Game
from movecore.movegen import in_check, is_square_attacked, legal_destinations
from movecore.notation import describe_move
from movecore.rules import game_status

from .config import configure_logging, load_config

logger = logging.getLogger(__name__)

COLOR_PATTERN = "^[wb]$"
KIND_PATTERN = "^[pnbrqk]$"


class PositionRequest(BaseModel):
    placement: str = Field(default=INITIAL_PLACEMENT)


class SquareRequest(PositionRequest):
    square: str = Field(min_length=2, max_length=2)


class AttackRequest(SquareRequest):
    by_color: str = Field(pattern=COLOR_PATTERN)


class DescribeRequest(BaseModel):
    kind: str = Field(pattern=KIND_PATTERN)
    destination: str = Field(min_length=2, max_length=2)
    was_capture: bool = Field(default=False)


class StatusRequest(PositionRequest):
    to_move: str = Field(default="w", pattern=COLOR_PATTERN)


class MoveRequest(StatusRequest):
    from_square: str = Field(min_length=2, max_length=2)
    to_square: str = Field(min_length=2, max_length=2)
    promotion: str = Field(default=QUEEN, pattern="^[nbrq]$")


config = load_config()


@asynccontextmanager
async def lifespan(_app: FastAPI):
    configure_logging(config.log_level)
    logger.info("Move-legality API started (strict_king=%s)", config.strict_king)
    yield


app = FastAPI(title="Move Legality API", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _board_from_placement(placement: str) -> Board:
    try:
        return Board.from_placement(placement)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


def _square(name: str) -> Square:
    try:
        return parse_square(name)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.post("/legal-destinations")
def legal_destinations_endpoint(payload: SquareRequest) -> dict:
    board = _board_from_placement(payload.placement)
    square = _square(payload.square)
    piece = board.piece_at(square)
    try:
        targets = legal_destinations(board, square, strict=config.strict_king)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return {
        "square": square_name(square),
        "piece": None if piece is None else piece.symbol(),
        "destinations": sorted(square_name(target) for target in targets),
    }


@app.post("/attacked")
def attacked(payload: AttackRequest) -> dict:
    board = _board_from_placement(payload.placement)
    square = _square(payload.square)
    return {"attacked": is_square_attacked(board, square, payload.by_color)}


@app.post("/describe")
def describe(payload: DescribeRequest) -> dict:
    destination = _square(payload.destination)
    return {"notation": describe_move(payload.kind, destination, payload.was_capture)}


@app.post("/status")
def status(payload: StatusRequest) -> dict:
    board = _board_from_placement(payload.placement)
    try:
        result = game_status(board, payload.to_move, strict=config.strict_king)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return {"status": result, "in_check": in_check(board, payload.to_move)}


@app.post("/move")
def move(payload: MoveRequest) -> dict:
    game = Game(
        board=_board_from_placement(payload.placement),
        turn=payload.to_move,
        strict=config.strict_king,
    )
    try:
        record = game.play(_square(payload.from_square), _square(payload.to_square), payload.promotion)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return {
        "placement": game.board.to_placement(),
        "to_move": game.turn,
        "last_move": record.move.uci(),
        "notation": record.notation,
        "captured": record.captured,
        "promotion": record.promotion,
        "status": record.status,
    }
