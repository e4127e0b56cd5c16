import enum
from vetclinic import db


class CatGender(enum.Enum):
    MALE = 'Male'
    FEMALE = 'Female'


class Cat(db.Model):
    __tablename__ = 'cats'
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    gender = db.Column(db.String(10))
    breed = db.Column(db.String(100))
    color = db.Column(db.String(50))
    age = db.Column(db.Integer)
    # Nullable at table level; the API always requires it
    owner_id = db.Column(db.Integer, db.ForeignKey('owners.id'), nullable=True)
    visits = db.relationship('Visit', backref='cat', lazy=True)

    def __repr__(self):
        return f'<Cat {self.name} (owner {self.owner_id})>'
