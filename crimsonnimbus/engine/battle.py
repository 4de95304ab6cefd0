"""Battle resolution against a random reference character."""

import logging
from typing import Optional, Union

from crimsonnimbus.engine.guards import load_active_owned_character
from crimsonnimbus.engine.value_points import ValuePointCalculator
from crimsonnimbus.errors import ServiceUnavailableError
from crimsonnimbus.helpers.debug import log_call
from crimsonnimbus.models.characters import PlayerCharacter
from crimsonnimbus.models.outcomes import BattleOutcome
from crimsonnimbus.persistence.stores import CharacterStore, IdentityStore

logger = logging.getLogger(__name__.split(".")[-1])

NO_OPPONENT_ERR = "No reference character is available to battle."


class BattleResolver:
    """
    Runs one battle and applies its outcome.

    A character is either active or retired. Winning keeps it active and grows
    its streak; losing retires it for good and freezes ``wins``. Only the
    opponent is scored with the streak bonus, so every win makes the next
    challenger stronger.
    """

    def __init__(
        self,
        characters: CharacterStore,
        identities: IdentityStore,
        calculator: Optional[ValuePointCalculator] = None,
    ) -> None:
        self._characters = characters
        self._identities = identities
        self._calculator = calculator or ValuePointCalculator()

    @log_call
    def battle(self, owner_id: str, character_id: Union[int, str, None]) -> BattleOutcome:
        """
        Fight a random opponent.

        Args:
            owner_id: Authenticated caller identity id
            character_id: Character sent into battle

        Returns:
            BattleOutcome, for wins and losses alike

        Raises:
            InvalidArgumentError: malformed id
            NotFoundError: character does not exist
            ForbiddenError: caller does not own the character
            InvalidStateError: character has retired
            ServiceUnavailableError: reference pool is empty
            ConflictError: character changed concurrently
        """
        player = load_active_owned_character(self._characters, owner_id, character_id)

        opponent = self._characters.random_reference_character()
        if opponent is None:
            raise ServiceUnavailableError(NO_OPPONENT_ERR)

        player_score = self._calculator.score(player, 0)
        opponent_score = self._calculator.score(opponent, player.wins)
        logger.debug(
            f"Character {player.id} scored {player_score} against {opponent.name} "
            f"({opponent_score}) at streak {player.wins}; "
            f"player {self._calculator.breakdown(player, 0)}, "
            f"opponent {self._calculator.breakdown(opponent, player.wins)}"
        )

        if player_score >= opponent_score:
            saved = self._characters.save(player.model_copy(update={"wins": player.wins + 1}))
            logger.info(f"Character {saved.id} beat {opponent.name}, streak is now {saved.wins}")
            return BattleOutcome(
                won=True,
                player=saved,
                player_score=player_score,
                opponent=opponent,
                opponent_score=opponent_score,
            )

        saved = self._characters.save(player.model_copy(update={"is_active": False}))
        high_score = self._record_high_score(saved)
        logger.info(f"Character {saved.id} lost to {opponent.name} and retired with {saved.wins} wins")
        return BattleOutcome(
            won=False,
            player=saved,
            player_score=player_score,
            opponent=opponent,
            opponent_score=opponent_score,
            high_score=high_score,
        )

    def _record_high_score(self, retired: PlayerCharacter) -> int:
        """Raise the owner's high score to the retired streak if it beats it."""
        owner = self._identities.raise_high_score(retired.owner_id, retired.wins)
        if owner is None:
            logger.warning(f"Owner {retired.owner_id} of character {retired.id} not found, high score skipped")
            return retired.wins
        if owner.high_score == retired.wins and retired.wins > 0:
            logger.info(f"High score for identity {owner.id} is {owner.high_score}")
        return owner.high_score
