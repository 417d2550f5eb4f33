from findmeme.database.repos.meme_query import MemeQueryRepo
from findmeme.domain.enums import MediaType, MemeStatus


def test_list_approved_excludes_pending_and_rejected(db, make_meme):
    make_meme("visible", status=MemeStatus.approved)
    make_meme("waiting", status=MemeStatus.pending)
    make_meme("refused", status=MemeStatus.rejected)
    titles = [m.title for m in MemeQueryRepo(db).list_approved()]
    assert titles == ["visible"]


def test_list_approved_newest_first(db, make_meme):
    a = make_meme("first")
    b = make_meme("second")
    c = make_meme("third")
    ids = [m.id for m in MemeQueryRepo(db).list_approved()]
    assert ids == [c.id, b.id, a.id]


def test_search_matches_title_or_tag_case_insensitively(db, make_meme):
    by_title = make_meme("Grumpy CAT")
    by_tag = make_meme("Monday mood", tags=["Cats"])
    make_meme("dog days", tags=["dog"])
    make_meme("cat hidden", status=MemeStatus.pending, tags=["cat"])

    hits = MemeQueryRepo(db).list_approved(search="cat")
    assert {m.id for m in hits} == {by_title.id, by_tag.id}


def test_search_and_type_filter_combine(db, make_meme):
    make_meme("cat pic", media_type=MediaType.image)
    gif = make_meme("cat loop", media_type=MediaType.gif)
    hits = MemeQueryRepo(db).list_approved(search="cat", media_type=MediaType.gif)
    assert [m.id for m in hits] == [gif.id]


def test_views_carry_sorted_tags_and_empty_list_when_untagged(db, make_meme):
    tagged = make_meme("tagged", tags=["zebra", "Apple"])
    plain = make_meme("plain")
    repo = MemeQueryRepo(db)
    assert repo.get_by_id(tagged.id).tags == ["apple", "zebra"]
    assert repo.get_by_id(plain.id).tags == []
    assert repo.get_by_id(999_999) is None


def test_get_by_id_returns_any_status(db, make_meme):
    m = make_meme("secret", status=MemeStatus.rejected)
    view = MemeQueryRepo(db).get_by_id(m.id)
    assert view.status is MemeStatus.rejected


def test_list_pending_oldest_first_with_submitter(db, make_user, make_meme):
    u = make_user("poster")
    older = make_meme("older", status=MemeStatus.pending, user_id=u.id)
    anon = make_meme("anon", status=MemeStatus.pending)
    make_meme("done", status=MemeStatus.approved)

    pending = MemeQueryRepo(db).list_pending()
    assert [m.id for m in pending] == [older.id, anon.id]
    assert pending[0].submitted_by == "poster"
    assert pending[1].submitted_by is None


def test_stats_counts_by_status_and_distinct_submitters(db, make_user, make_meme):
    u1 = make_user("u1")
    u2 = make_user("u2")
    make_meme("a", status=MemeStatus.pending, user_id=u1.id)
    make_meme("b", status=MemeStatus.pending, user_id=u1.id)
    make_meme("c", status=MemeStatus.approved, user_id=u2.id)
    make_meme("d", status=MemeStatus.rejected)

    stats = MemeQueryRepo(db).stats()
    assert (stats.pending_count, stats.approved_count, stats.rejected_count) == (2, 1, 1)
    assert stats.total_users == 2


def test_stats_on_empty_catalog(db):
    stats = MemeQueryRepo(db).stats()
    assert stats.pending_count == stats.approved_count == stats.rejected_count == 0
    assert stats.total_users == 0
