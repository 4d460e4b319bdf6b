# finance/models.py
from finance import db


class User(db.Model):
    __tablename__ = 'users'

    userid = db.Column(db.String(255), primary_key=True)
    name = db.Column('username', db.String(255))
    password = db.Column('password', db.String(255))  # plaintext, not hashed

    def __init__(self, userid=None, name=None, password=None):
        super().__init__(userid=userid, name=name, password=password)

    def __repr__(self):
        return f"<User {self.userid}>"
