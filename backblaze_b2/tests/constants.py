ACCOUNT_ID = "testId"
APPLICATION_KEY = "testKey"
AUTH_TOKEN = "testAuthToken"
API_URL = "https://api900.backblaze.com/b2api/v1"
DOWNLOAD_URL = "https://f900.backblaze.com"
AUTHORIZE_URL = "https://api.backblazeb2.com/b2api/v1/b2_authorize_account"
UPLOAD_URL = (
    "https://pod-000-1005-03.backblaze.com/b2api/v1/b2_upload_file/bucketId/c001_v0001005_t0014"
)
UPLOAD_TOKEN = "uploadAuthToken"
FILE_ID = "4_z4c2b953461da9c825f260e1b_f1114dbf5bg9707e8_d20160206_m012226_c001_v1111017_t0010"
CONTENT = "The quick brown box jumps over the lazy dog"
