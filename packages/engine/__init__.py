from .anagram import is_one_letter_more
from .errors import InputLengthExceeded, InputRejected, ResourceInitializationFailure
from .ledger import StemLedger
from .rounds import Verdict, evaluate_turn, parse_turn, play_turn
from .state import GameState, WordPool, new_game, random_game
from .words import Word

__all__ = [
    "is_one_letter_more", "InputRejected", "InputLengthExceeded",
    "ResourceInitializationFailure", "StemLedger", "Verdict", "evaluate_turn",
    "parse_turn", "play_turn", "GameState", "WordPool", "new_game", "random_game", "Word",
]
