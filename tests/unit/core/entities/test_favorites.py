"""
Tests pour la pile de favoris (FavoriteStack).
"""

import pytest

from uocflix.core.entities.catalog import Film, Series
from uocflix.core.entities.favorites import Favorite, FavoriteStack
from uocflix.core.errors import PreconditionViolation


class TestFavoriteStackBasics:
    """Tests pour push/pop/top/empty."""

    def test_new_stack_is_empty(self):
        """Une pile neuve est vide."""
        stack = FavoriteStack()
        assert stack.is_empty()
        assert len(stack) == 0
        assert not stack

    def test_push_then_pop_is_lifo(self, comedy_film: Film, drama_film: Film):
        """Le dernier film empile est le premier depile."""
        stack = FavoriteStack()
        stack.push(comedy_film)
        stack.push(drama_film)

        assert stack.pop() == Favorite(film=drama_film)
        assert stack.pop() == Favorite(film=comedy_film)
        assert stack.is_empty()

    def test_top_does_not_remove(self, comedy_film: Film):
        """top() retourne le sommet sans le retirer."""
        stack = FavoriteStack()
        stack.push(comedy_film)
        assert stack.top().film is comedy_film
        assert len(stack) == 1

    def test_duplicates_are_allowed(self, comedy_film: Film):
        """Le meme film peut etre empile deux fois."""
        stack = FavoriteStack()
        stack.push(comedy_film)
        stack.push(comedy_film)
        assert len(stack) == 2

    def test_pop_on_empty_stack_violates_precondition(self):
        """Depiler une pile vide est une erreur de contrat."""
        with pytest.raises(PreconditionViolation):
            FavoriteStack().pop()

    def test_top_on_empty_stack_violates_precondition(self):
        """Lire le sommet d'une pile vide est une erreur de contrat."""
        with pytest.raises(PreconditionViolation):
            FavoriteStack().top()

    def test_iteration_is_most_recent_first(
        self, comedy_film: Film, drama_film: Film, action_film: Film
    ):
        """L'iteration part du sommet."""
        stack = FavoriteStack()
        for film in (comedy_film, drama_film, action_film):
            stack.push(film)
        assert stack.films() == [action_film, drama_film, comedy_film]


class TestFavoriteStackDuplicate:
    """Tests pour duplicate() et clear()."""

    def test_duplicate_has_same_entries(self, comedy_film: Film, drama_film: Film):
        """La copie contient les memes entrees dans le meme ordre."""
        stack = FavoriteStack()
        stack.push(comedy_film)
        stack.push(drama_film)

        copy = stack.duplicate()
        assert copy.films() == stack.films()

    def test_draining_duplicate_leaves_source_intact(
        self, comedy_film: Film, drama_film: Film
    ):
        """Depiler la copie ne modifie pas l'original."""
        stack = FavoriteStack()
        stack.push(comedy_film)
        stack.push(drama_film)

        copy = stack.duplicate()
        while not copy.is_empty():
            copy.pop()

        assert len(stack) == 2

    def test_duplicate_shares_film_references(self, comedy_film: Film):
        """Les films references ne sont pas copies."""
        stack = FavoriteStack()
        stack.push(comedy_film)
        assert stack.duplicate().top().film is comedy_film

    def test_clear_is_safe_on_empty_stack(self, comedy_film: Film):
        """clear() vide la pile et peut etre rappele."""
        stack = FavoriteStack()
        stack.push(comedy_film)
        stack.clear()
        stack.clear()
        assert stack.is_empty()


class TestFavoriteStackAggregates:
    """Tests pour count_per_series() et length_in_min()."""

    def test_length_in_min_sums_durations(self, comedy_film: Film, drama_film: Film):
        """90 + 45 = 135 minutes."""
        stack = FavoriteStack()
        stack.push(comedy_film)
        stack.push(drama_film)
        assert stack.length_in_min() == 135

    def test_length_in_min_empty_is_zero(self):
        """Une pile vide totalise 0 minute."""
        assert FavoriteStack().length_in_min() == 0

    def test_count_per_series_ignores_other_series(
        self, comedy_film: Film, drama_film: Film, comedy_series: Series
    ):
        """Seuls les films de la serie demandee sont comptes."""
        stack = FavoriteStack()
        stack.push(comedy_film)
        stack.push(drama_film)
        stack.push(comedy_film)
        assert stack.count_per_series(comedy_series) == 2

    def test_count_per_series_zero_when_no_match(
        self, drama_film: Film, standalone_film: Film, comedy_series: Series
    ):
        """Aucun favori de la serie : 0."""
        stack = FavoriteStack()
        stack.push(drama_film)
        stack.push(standalone_film)
        assert stack.count_per_series(comedy_series) == 0

    def test_large_stack_does_not_exhaust_call_stack(self, comedy_film: Film, comedy_series: Series):
        """Les agregations sont iteratives, meme sur de grandes piles."""
        stack = FavoriteStack()
        for _ in range(50_000):
            stack.push(comedy_film)
        assert stack.length_in_min() == 50_000 * 90
        assert stack.count_per_series(comedy_series) == 50_000
