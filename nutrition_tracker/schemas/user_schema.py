from marshmallow import Schema, fields, validate, pre_load


class CreateUserSchema(Schema):
    name = fields.Str(required=True, validate=validate.Length(min=1, max=100))
    account_id = fields.Int(allow_none=True, load_default=None)

    @pre_load
    def strip_name(self, data, **kwargs):
        if isinstance(data, dict) and isinstance(data.get("name"), str):
            data = dict(data)
            data["name"] = data["name"].strip()
        return data
