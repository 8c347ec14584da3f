from tortoise import fields, models
from ...common.models import TimestampMixin, generate_ksuid


class Merchant(TimestampMixin):
    id = fields.IntField(primary_key=True)
    public_id = fields.CharField(
        max_length=27, unique=True, default=generate_ksuid, db_index=True
    )
    name = fields.CharField(max_length=255)

    outlets: fields.ReverseRelation["Outlet"]
    transactions: fields.ReverseRelation["Transaction"]

    def __str__(self):
        return f"Merchant {self.name} ({self.public_id})"

    class Meta:
        table = "merchants"


class Outlet(TimestampMixin):
    id = fields.IntField(primary_key=True)
    public_id = fields.CharField(
        max_length=27, unique=True, default=generate_ksuid, db_index=True
    )
    name = fields.CharField(max_length=255)

    merchant: fields.ForeignKeyRelation[Merchant] = fields.ForeignKeyField(
        "models.Merchant", related_name="outlets", on_delete=fields.CASCADE
    )

    transactions: fields.ReverseRelation["Transaction"]

    def __str__(self):
        return f"Outlet {self.name} ({self.public_id})"

    class Meta:
        table = "outlets"
        unique_together = (("merchant", "name"),)


class Transaction(TimestampMixin):
    id = fields.IntField(primary_key=True)
    public_id = fields.CharField(
        max_length=27, unique=True, default=generate_ksuid, db_index=True
    )

    merchant: fields.ForeignKeyRelation[Merchant] = fields.ForeignKeyField(
        "models.Merchant", related_name="transactions", on_delete=fields.CASCADE
    )
    outlet: fields.ForeignKeyRelation[Outlet] = fields.ForeignKeyField(
        "models.Outlet", related_name="transactions", on_delete=fields.CASCADE
    )

    bill_total = fields.DecimalField(max_digits=18, decimal_places=2)
    transacted_at = fields.DatetimeField(
        db_index=True, description="Wall-clock time of the sale"
    )

    def __str__(self):
        return f"Transaction {self.public_id}: {self.bill_total} at {self.transacted_at}"

    class Meta:
        table = "transactions"
        ordering = ["transacted_at"]
