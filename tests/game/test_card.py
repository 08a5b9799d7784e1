import pytest

from data.enums import Suit
from exceptions import InvalidRankError, InvalidSuitError, MalformedTokenError
from game.card import Card


class TestCard:
    @pytest.mark.parametrize(
        "token,rank,suit",
        [
            ("2C", 2, Suit.CLUBS),
            ("9d", 9, Suit.DIAMONDS),
            ("TH", 10, Suit.HEARTS),
            ("jS", 11, Suit.SPADES),
            ("Qh", 12, Suit.HEARTS),
            ("kc", 13, Suit.CLUBS),
            ("AD", 14, Suit.DIAMONDS),
        ],
    )
    def test_from_token(self, token, rank, suit):
        """Test rank and suit parsing, in either case."""
        card = Card.from_token(token)
        assert card.rank == rank
        assert card.suit == suit

    def test_str_is_uppercase_token(self):
        assert str(Card.from_token("th")) == "TH"
        assert str(Card.from_token("as")) == "AS"

    def test_repr(self):
        assert repr(Card(14, Suit.SPADES)) == "Ace of Spades"
        assert repr(Card(10, Suit.CLUBS)) == "Ten of Clubs"

    @pytest.mark.parametrize("token", ["", "A", "10H", "AHS"])
    def test_malformed_token(self, token):
        with pytest.raises(MalformedTokenError) as exc_info:
            Card.from_token(token)
        assert exc_info.value.text == token

    @pytest.mark.parametrize("token", ["XD", "1H", "0S", "?C"])
    def test_invalid_rank(self, token):
        with pytest.raises(InvalidRankError, match="Invalid rank"):
            Card.from_token(token)

    @pytest.mark.parametrize("token", ["KX", "2z", "A♠"])
    def test_invalid_suit(self, token):
        with pytest.raises(InvalidSuitError, match="Invalid suit"):
            Card.from_token(token)

    def test_rank_checked_before_suit(self):
        """A token bad in both positions reports the rank."""
        with pytest.raises(InvalidRankError):
            Card.from_token("XX")

    def test_constructor_validation(self):
        with pytest.raises(ValueError):
            Card(1, Suit.HEARTS)
        with pytest.raises(ValueError):
            Card(15, Suit.HEARTS)
        with pytest.raises(ValueError):
            Card(10, "H")

    def test_equality_and_hash(self):
        assert Card.from_token("ah") == Card(14, Suit.HEARTS)
        assert Card.from_token("AH") != Card.from_token("AD")
        assert len({Card.from_token("AH"), Card.from_token("ah")}) == 1

    def test_immutable(self):
        card = Card(2, Suit.CLUBS)
        with pytest.raises(AttributeError):
            card.rank = 3
