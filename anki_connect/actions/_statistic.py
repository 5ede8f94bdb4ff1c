"""Statistic actions: review counts, review logs and collection stats."""

from anki_connect import api
from anki_connect._utils import require_params


def get_num_cards_reviewed_today():
    return api.invoke("getNumCardsReviewedToday")


def get_num_cards_reviewed_by_day():
    """Return ``[["2021-02-28", 124], ...]`` pairs of date and review count."""
    return api.invoke("getNumCardsReviewedByDay")


def get_collection_stats_html(params=None):
    """Return the collection statistics report as HTML.

    ``whole_collection`` defaults to True; False limits the report to the
    current deck.
    """
    whole_collection = (params or {}).get("whole_collection", True)
    return api.invoke("getCollectionStatsHTML", {"whole_collection": whole_collection})


def card_reviews(params):
    """Return review log rows for ``deck`` newer than review ID ``start_id``.

    Each row is ``[reviewTime, cardID, usn, buttonPressed, newInterval,
    previousInterval, newFactor, reviewDuration, reviewType]``.
    """
    deck, start_id = require_params(params, "card_reviews", "deck", "start_id")
    return api.invoke("cardReviews", {"deck": deck, "start_id": start_id})


def get_reviews_of_cards(params):
    (cards,) = require_params(params, "get_reviews_of_cards", "cards")
    return api.invoke("getReviewsOfCards", {"cards": cards})


def get_latest_review_id(params):
    """Return the newest review ID for ``deck``, or 0 when it has none."""
    (deck,) = require_params(params, "get_latest_review_id", "deck")
    return api.invoke("getLatestReviewID", {"deck": deck})


def insert_reviews(params):
    """Insert review log rows (same layout as card_reviews) into the database."""
    (reviews,) = require_params(params, "insert_reviews", "reviews")
    return api.invoke("insertReviews", {"reviews": reviews})
