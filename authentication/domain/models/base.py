from django.contrib.auth.hashers import check_password, make_password
from django.db import models


class CredentialModel(models.Model):
    """Abstract base for records that log in with a password.

    Only salted hashes are stored; comparison goes through Django's hashers.
    """

    password = models.CharField(max_length=128)

    class Meta:
        abstract = True

    def set_password(self, raw_password):
        self.password = make_password(raw_password)

    def check_password(self, raw_password):
        if not self.password:
            return False
        return check_password(raw_password, self.password)
