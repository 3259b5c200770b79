from conftest import FIXED_TIME

def upload(client):
    return client.post(
        "/mic_upload_process",
        data={"Bacteria_Name": "E.coli", "Assay_Name": "MIC1"},
        files={"upload_file": ("sample.csv", b"conc,od\n1,0.5\n", "text/csv")},
    )

def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["plot_script_present"] is False
    assert body["storage_items"] == {"sample_count": 0, "stored_file_count": 0}

def test_samples_list_after_upload(client):
    upload(client)

    samples = client.get("/samples/").json()

    assert len(samples) == 1
    assert samples[0]["identifier"] == str(FIXED_TIME)
    assert samples[0]["url"] == f"/mic-data/{FIXED_TIME}-data.csv"
    assert samples[0]["plotSrc"] == f"./mic-output/mic-plot-{FIXED_TIME}.png"
    assert samples[0]["plotStatus"] == "completed"

def test_sample_detail(client):
    upload(client)

    detail = client.get(f"/samples/{FIXED_TIME}").json()

    assert detail["experiment"]["bacteria"] == "E.coli"
    assert detail["sample"]["originalName"] == "sample.csv"
    assert detail["summary"] == {"rowCount": 1, "columns": ["conc", "od"]}
    assert detail["dataExists"] is True
    assert detail["plotExists"] is True

def test_unknown_sample(client):
    response = client.get("/samples/123")

    assert response.status_code == 404
    assert response.json() == {"detail": "Sample 123 not found", "type": "SampleNotFoundError"}
