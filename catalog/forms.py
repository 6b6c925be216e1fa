from flask_wtf import FlaskForm
from wtforms import DecimalField, IntegerField, StringField, SubmitField
from wtforms.validators import DataRequired, InputRequired, Length, NumberRange

from .schemas import NAME_MAX_LENGTH, PRICE_MAX, QUANTITY_MAX, load_product


class ProductForm(FlaskForm):
    name = StringField("Name", validators=[
        DataRequired(message="Name is required"),
        Length(max=NAME_MAX_LENGTH, message=f"Name must be at most {NAME_MAX_LENGTH} characters"),
    ])

    price = DecimalField("Price", places=2, validators=[
        InputRequired(message="Price is required"),
        NumberRange(min=0, max=PRICE_MAX, message="Price must be zero or positive"),
    ])

    # InputRequired so that 0 is accepted
    quantity = IntegerField("Quantity", default=0, validators=[
        InputRequired(message="Quantity is required"),
        NumberRange(min=0, max=QUANTITY_MAX, message=f"Quantity must be between 0 and {QUANTITY_MAX}"),
    ])

    submit = SubmitField("Save")

    def to_product_data(self) -> dict:
        """Run the submitted values through the same validation as the JSON API."""
        return load_product({
            "name": self.name.data,
            "price": str(self.price.data),
            "quantity": self.quantity.data,
        })
