from vetclinic import db


class Visit(db.Model):
    __tablename__ = 'visits'
    id = db.Column(db.Integer, primary_key=True)
    cat_id = db.Column(db.Integer, db.ForeignKey('cats.id'), nullable=False)
    visit_date = db.Column(db.DateTime(timezone=True), nullable=False)
    reason = db.Column(db.String(255), nullable=False)
    notes = db.Column(db.Text)

    def __repr__(self):
        return f'<Visit {self.id} for cat {self.cat_id}>'
