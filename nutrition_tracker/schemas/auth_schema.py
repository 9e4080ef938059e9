from marshmallow import Schema, fields, validate, pre_load


class CredentialsSchema(Schema):
    username = fields.Str(required=True, validate=validate.Length(min=1, max=100))
    password = fields.Str(required=True, validate=validate.Length(min=1))

    @pre_load
    def strip_username(self, data, **kwargs):
        if isinstance(data, dict) and isinstance(data.get("username"), str):
            data = dict(data)
            data["username"] = data["username"].strip()
        return data
