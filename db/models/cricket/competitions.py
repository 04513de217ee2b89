from peewee import AutoField, CharField, IntegerField

from db.base import BaseModel


class Competition(BaseModel):
    id = AutoField()
    cid = IntegerField(unique=True)
    title = CharField(max_length=255, null=True)
    abbr = CharField(max_length=50, null=True)
    season = CharField(max_length=20, null=True)
    total_matches = IntegerField(null=True)
    total_teams = IntegerField(null=True)

    class Meta:
        table_name = "competitions"

    @classmethod
    def by_cid(cls, cid) -> "Competition | None":
        if cid is None:
            return None
        try:
            cid = int(cid)
        except (TypeError, ValueError):
            return None
        return cls.get_or_none(cls.cid == cid)

    @classmethod
    def upsert_competition(cls, cid: int, data: dict) -> "Competition":
        return cls.upsert({"cid": cid}, data)


class Venue(BaseModel):
    id = AutoField()
    venue_id = CharField(max_length=50, unique=True)
    name = CharField(max_length=255, null=True)
    location = CharField(max_length=255, null=True)
    country = CharField(max_length=100, null=True)
    timezone = CharField(max_length=50, null=True)

    class Meta:
        table_name = "venues"

    @classmethod
    def by_venue_id(cls, venue_id) -> "Venue | None":
        if venue_id is None or venue_id == "":
            return None
        return cls.get_or_none(cls.venue_id == str(venue_id))

    @classmethod
    def upsert_venue(cls, venue_id, data: dict) -> "Venue":
        return cls.upsert({"venue_id": str(venue_id)}, data)
