from vetclinic import db


class Owner(db.Model):
    __tablename__ = 'owners'
    id = db.Column(db.Integer, primary_key=True)
    first_name = db.Column(db.String(100), nullable=False)
    last_name = db.Column(db.String(100), nullable=False)
    phone = db.Column(db.String(20), nullable=False)
    email = db.Column(db.String(120))
    cats = db.relationship('Cat', backref='owner', lazy=True)

    def __repr__(self):
        return f'<Owner {self.first_name} {self.last_name}>'
