import pytest

from findmeme.domain.entities.user import AuthContext
from findmeme.domain.enums import MediaType, MemeStatus
from findmeme.domain.errors import NotFound, ValidationError
from findmeme.services.catalog.service import CatalogService
from findmeme.services.favorites.service import FavoritesService


@pytest.fixture()
def ctx(make_user):
    u = make_user("fan")
    return AuthContext(user_id=u.id, username=u.username)


def test_blank_search_lists_everything_approved(db, make_meme):
    make_meme("one")
    make_meme("two")
    assert len(CatalogService(db).list(search="   ")) == 2


def test_type_filter_is_parsed(db, make_meme):
    make_meme("still", media_type=MediaType.image)
    clip = make_meme("clip", media_type=MediaType.video)
    assert [m.id for m in CatalogService(db).list(media_type="VIDEO")] == [clip.id]
    with pytest.raises(ValidationError):
        CatalogService(db).list(media_type="hologram")


def test_pending_cat_meme_is_not_searchable(db, make_meme):
    make_meme("cat meme", status=MemeStatus.pending)
    assert CatalogService(db).list(search="cat") == []


def test_get_by_id(db, make_meme):
    m = make_meme("hello", tags=["greeting"])
    view = CatalogService(db).get_by_id(m.id)
    assert view.title == "hello"
    assert view.tags == ["greeting"]
    with pytest.raises(NotFound):
        CatalogService(db).get_by_id(m.id + 1000)


def test_add_twice_check_remove(db, ctx, make_meme):
    m = make_meme()
    svc = FavoritesService(db)
    svc.add(ctx, m.id)
    svc.add(ctx, m.id)
    assert svc.check(ctx, m.id) is True
    assert len(svc.list_for_user(ctx)) == 1
    svc.remove(ctx, m.id)
    assert svc.check(ctx, m.id) is False
    # removing again is fine
    svc.remove(ctx, m.id)


def test_favoriting_missing_meme_is_not_found(db, ctx):
    with pytest.raises(NotFound):
        FavoritesService(db).add(ctx, 5555)
